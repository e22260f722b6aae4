"""Test runner module - discovers compiled modules, runs pytest, measures coverage."""

from .cover import CoverageFacility, CoverageSession, PythonCoverage, run_coverage_scoped
from .discovery import discover_modules, remove_duplicates, select_modules
from .engine import PytestEngine, TestEngine
from .errors import (
    CoverageCompileError,
    CoverageExportError,
    EunitError,
    InvalidArgument,
    TestEngineError,
    TestsFailed,
)
from .models import RunOptions, RunReport, Verdict
from .options import build_engine_options, parse_options
from .paths import BuildPaths, resolve_apps
from .task import execute, run

__all__ = [
    # Models
    "RunOptions",
    "RunReport",
    "Verdict",
    "BuildPaths",
    # Operations
    "parse_options",
    "discover_modules",
    "remove_duplicates",
    "select_modules",
    "build_engine_options",
    "run_coverage_scoped",
    "execute",
    "run",
    "resolve_apps",
    # Collaborators
    "TestEngine",
    "PytestEngine",
    "CoverageFacility",
    "CoverageSession",
    "PythonCoverage",
    # Errors
    "EunitError",
    "InvalidArgument",
    "CoverageCompileError",
    "CoverageExportError",
    "TestsFailed",
    "TestEngineError",
]
