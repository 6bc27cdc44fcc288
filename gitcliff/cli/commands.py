from __future__ import annotations

import sys

from loguru import logger

from gitcliff.config.loader import load_config
from gitcliff.errors import BinaryNotFoundError, SpawnError
from gitcliff.runner import exit_status, run_git_cliff
from gitcliff.utils.logging import setup_logging

EXIT_NOT_FOUND = 127
EXIT_CANNOT_EXECUTE = 126


def main(argv: list[str] | None = None) -> int:
    # every argument belongs to git-cliff, so nothing is parsed here
    args = list(sys.argv[1:] if argv is None else argv)
    cfg = load_config()
    setup_logging(cfg.log_level)

    try:
        result = run_git_cliff(args, cfg.spawn)
    except BinaryNotFoundError as exc:
        print(f"gitcliff: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except SpawnError as exc:
        print(f"gitcliff: {exc}", file=sys.stderr)
        return EXIT_CANNOT_EXECUTE

    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr)
    logger.debug("cli finished exit_code={}", result.exit_code)
    return exit_status(result.exit_code)
