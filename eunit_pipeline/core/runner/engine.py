"""Run compiled test modules through pytest and reduce the result to a verdict."""

from __future__ import annotations

import importlib
import logging
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path

import pytest

from ...constants import UNIT_EXTENSION
from .errors import TestEngineError
from .models import Verdict

logger = logging.getLogger(__name__)


class TestEngine(ABC):
    """Executes a set of modules' tests and returns an aggregate verdict."""

    __test__ = False

    @abstractmethod
    def run(self, modules: list[str], options: list[str], compile_path: Path) -> Verdict:
        """Run the tests of 'modules' found under compile_path."""


class PytestEngine(TestEngine):
    """In-process pytest runner.

    Module files are passed to pytest explicitly, so pytest collects them
    even when their names do not match its test_*.py pattern. Each run
    imports the app's modules fresh, see isolated_imports.
    """

    def run(self, modules: list[str], options: list[str], compile_path: Path) -> Verdict:
        if not modules:
            logger.info("There were no tests to run.")
            return Verdict.PASS

        compile_path = Path(compile_path)
        files = [str(compile_path / f"{name}{UNIT_EXTENSION}") for name in modules]

        args = [
            *files,
            *options,
            "-p", "no:cacheprovider",
            "--rootdir", str(compile_path),
        ]
        logger.debug(f"pytest {' '.join(args)}")

        with isolated_imports(compile_path):
            exit_code = pytest.main(args)
        return self._to_verdict(exit_code)

    def _to_verdict(self, exit_code: int) -> Verdict:
        """Map a pytest exit code onto PASS/FAIL, raising for engine faults."""

        if exit_code in (pytest.ExitCode.OK, pytest.ExitCode.NO_TESTS_COLLECTED):
            return Verdict.PASS

        if exit_code == pytest.ExitCode.TESTS_FAILED:
            return Verdict.FAIL

        try:
            reason = pytest.ExitCode(exit_code).name
        except ValueError:
            reason = str(exit_code)
        raise TestEngineError(f"pytest did not complete the run ({reason})")


def purge_modules(compile_path: Path) -> list[str]:
    """Drop every imported module whose file lives under compile_path."""

    root = Path(compile_path).resolve()
    purged = []
    for name, module in list(sys.modules.items()):
        filename = getattr(module, "__file__", None)
        if filename and Path(filename).resolve().is_relative_to(root):
            del sys.modules[name]
            purged.append(name)
    return purged


@contextmanager
def isolated_imports(compile_path: Path):
    """Import the app's modules fresh for one run and forget them afterwards.

    Bytecode is not written so an edited module is always recompiled, and
    sys.path is restored so compile directories do not accumulate.
    """
    saved_path = list(sys.path)
    saved_dont_write = sys.dont_write_bytecode

    purge_modules(compile_path)
    importlib.invalidate_caches()
    sys.path.insert(0, str(compile_path))
    sys.dont_write_bytecode = True
    try:
        yield
    finally:
        sys.dont_write_bytecode = saved_dont_write
        sys.path[:] = saved_path
        purge_modules(compile_path)
