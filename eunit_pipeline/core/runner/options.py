"""Command-line flag parsing and translation into pytest arguments."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ...constants import SUREFIRE_REPORT_NAME
from .errors import InvalidArgument
from .models import RunOptions

logger = logging.getLogger(__name__)


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str):
        raise InvalidArgument(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _OptionParser(
        prog="eunit",
        description="Run the unit tests of the compiled app modules.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="enable verbose output",
    )
    parser.add_argument(
        "--surefire",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="write a Surefire-compatible JUnit XML report",
    )
    parser.add_argument(
        "--cover",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="export coverage data (as eunit.coverdata)",
    )
    parser.add_argument(
        "--module",
        action="append",
        default=[],
        metavar="MODULE",
        help="run tests from MODULE only; may be given more than once",
    )
    return parser


def parse_options(args: list[str]) -> RunOptions:
    """Parse raw task arguments into RunOptions.

    Raises:
        InvalidArgument: on an unknown flag or a flag missing its value
    """
    parser = _build_parser()
    namespace, extras = parser.parse_known_args(args)

    unknown = [arg for arg in extras if arg.startswith("-")]
    if unknown:
        raise InvalidArgument(f"unrecognized arguments: {' '.join(unknown)}")

    if extras:
        logger.warning(f"Ignoring positional arguments: {extras}")

    return RunOptions(
        verbose=namespace.verbose,
        surefire=namespace.surefire,
        cover=namespace.cover,
        modules=tuple(namespace.module),
    )


def build_engine_options(options: RunOptions, report_dir: Path) -> list[str]:
    """Map enabled flags to pytest arguments; disabled flags add nothing."""

    engine_opts = []

    if options.verbose:
        engine_opts.append("-v")

    if options.surefire:
        engine_opts.append(f"--junitxml={Path(report_dir) / SUREFIRE_REPORT_NAME}")

    return engine_opts
