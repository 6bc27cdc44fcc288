from __future__ import annotations

import pytest

from gitcliff.errors import BinaryNotFoundError
from gitcliff.locator import find_binary
from gitcliff.utils.logging import setup_logging


def test_debug_level_shows_lookup_records(missing_platform, capsys) -> None:
    setup_logging("DEBUG")
    try:
        with pytest.raises(BinaryNotFoundError):
            find_binary(missing_platform)
        err = capsys.readouterr().err
        assert "platform package missing package=git-cliff-linux-nosucharch" in err
        assert "gitcliff.locator:find_binary" in err
    finally:
        setup_logging("WARNING")


def test_warning_level_keeps_stderr_quiet(missing_platform, capsys) -> None:
    setup_logging("WARNING")
    with pytest.raises(BinaryNotFoundError):
        find_binary(missing_platform)
    assert capsys.readouterr().err == ""
