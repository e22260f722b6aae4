"""Find the compiled modules of an app and choose which ones to test."""

from __future__ import annotations

import logging
from pathlib import Path

from ...constants import DEFAULT_TEST_SUFFIX, NON_MODULE_FILES, UNIT_EXTENSION

logger = logging.getLogger(__name__)


def discover_modules(output_dir: Path, suffix: str = DEFAULT_TEST_SUFFIX) -> list[str]:
    """List module names in output_dir, keeping only the test variant of a pair."""

    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        logger.warning(f"Compile directory {output_dir} does not exist; no modules found")
        return []

    names = [
        path.stem
        for path in sorted(output_dir.glob(f"*{UNIT_EXTENSION}"))
        if path.name not in NON_MODULE_FILES
    ]

    return remove_duplicates(names, suffix)


def remove_duplicates(modules: list[str], suffix: str = DEFAULT_TEST_SUFFIX) -> list[str]:
    """Drop every 'foo' that has a 'foo<suffix>' sibling.

    The engine runs the paired test module for a base module anyway, so
    keeping both would run the same tests twice.

    >>> remove_duplicates(["calc", "calc_test", "util"])
    ['calc_test', 'util']
    """
    present = set(modules)
    return [m for m in modules if m + suffix not in present]


def select_modules(requested: tuple[str, ...] | list[str], discovered: list[str]) -> list[str]:
    """Restrict discovered modules to the requested ones, in request order.

    Requests naming a module this app does not have are dropped: in an
    umbrella build the same request list is checked against every app.
    """
    if not requested:
        return discovered

    available = set(discovered)
    selected = [m for m in requested if m in available]

    dropped = [m for m in requested if m not in available]
    if dropped:
        logger.debug(f"Skipping modules not found in this app: {dropped}")

    return selected
