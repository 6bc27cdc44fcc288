from __future__ import annotations

from gitcliff.cli import main

raise SystemExit(main())
