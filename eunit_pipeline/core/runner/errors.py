"""Exceptions raised by the eunit task."""

from __future__ import annotations

from pathlib import Path


class EunitError(Exception):
    """Base class for every error the task reports."""


class InvalidArgument(EunitError):
    """Unrecognized or malformed command-line flag."""


class CoverageCompileError(EunitError):
    """Instrumenting the compiled modules for coverage failed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Failed to cover compile directory {path} with reason: {reason}"
        )


class CoverageExportError(EunitError):
    """Accumulated coverage data could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export coverage data to {path}: {reason}")


class TestsFailed(EunitError):
    """The test engine reported at least one failing test."""

    __test__ = False  # not a pytest test class

    def __init__(self, message: str = "One or more tests failed."):
        super().__init__(message)


class TestEngineError(EunitError):
    """pytest itself could not complete the run."""

    __test__ = False
