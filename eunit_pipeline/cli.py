"""Command-line entry point for the eunit task.

Usage:

    EUNIT_PROFILE=test eunit [--verbose] [--surefire] [--cover] [--module MODULE ...]

Runs in the current directory, which must be the project root. Exits 0 when
every app passes, 1 when tests fail, 2 on a bad flag and 3 on any other
task error.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .constants import (
    EXIT_INVALID_ARGUMENT,
    EXIT_OK,
    EXIT_TASK_ERROR,
    EXIT_TESTS_FAILED,
)
from .core.runner import EunitError, InvalidArgument, TestsFailed, run

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    args = sys.argv[1:] if argv is None else argv

    try:
        run(args, Path.cwd())
    except InvalidArgument as e:
        logger.error(f"eunit: {e}")
        return EXIT_INVALID_ARGUMENT
    except TestsFailed as e:
        logger.error(str(e))
        return EXIT_TESTS_FAILED
    except EunitError as e:
        logger.error(str(e))
        return EXIT_TASK_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
