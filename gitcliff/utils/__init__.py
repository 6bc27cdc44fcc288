from __future__ import annotations

from gitcliff.utils.logging import setup_logging

__all__ = ["setup_logging"]
