"""The eunit task: discover compiled modules, run their tests, report.

Usage (from a project whose test build is in _build/test/<app>/lib):

    eunit [--verbose] [--surefire] [--cover] [--module MODULE ...]

Flow per app:
    parse flags -> discover modules -> [start coverage] -> pytest
    -> [export coverage to <app_path>/eunit.coverdata] -> pass / TestsFailed
"""

from __future__ import annotations

import logging
from pathlib import Path

from ...constants import COVERDATA_FILENAME, SUREFIRE_REPORT_NAME
from .cover import CoverageFacility, CoverageSession, PythonCoverage, run_coverage_scoped
from .discovery import discover_modules, select_modules
from .engine import PytestEngine, TestEngine
from .errors import TestsFailed
from .models import RunOptions, RunReport, Verdict
from .options import build_engine_options, parse_options
from .paths import BuildPaths, configured_suffix, resolve_apps

logger = logging.getLogger(__name__)


def execute(
    options: RunOptions,
    paths: BuildPaths,
    engine: TestEngine | None = None,
    facility: CoverageFacility | None = None,
) -> RunReport:
    """Run the tests of one app.

    Raises:
        TestsFailed: the engine verdict was FAIL
        CoverageCompileError: --cover was given and instrumentation failed
        TestEngineError: pytest could not complete the run
    """
    engine = engine or PytestEngine()

    compile_path = paths.compile_path

    discovered = discover_modules(compile_path, configured_suffix())
    targets = select_modules(options.modules, discovered)
    engine_opts = build_engine_options(options, paths.app_path)

    def run_engine() -> Verdict:
        verdict = engine.run(targets, engine_opts, compile_path)
        if verdict is Verdict.FAIL:
            raise TestsFailed()
        return verdict

    report = RunReport(
        app=paths.app,
        modules=targets,
        verdict=Verdict.PASS,
        discovered=discovered,
        # pytest only writes the report when it actually runs
        report=(
            paths.app_path / SUREFIRE_REPORT_NAME
            if options.surefire and targets else None
        ),
    )

    if options.cover:
        facility = facility or PythonCoverage()
        coverdata = paths.app_path / COVERDATA_FILENAME
        session = CoverageSession(facility)

        report.verdict = run_coverage_scoped(
            compile_path, run_engine, facility, coverdata, session=session
        )

        if session.export_error is None:
            report.coverdata = coverdata
        else:
            report.export_error = str(session.export_error)
    else:
        report.verdict = run_engine()

    return report


def run(
    args: list[str],
    project_root: Path,
    apps: list[str] | None = None,
    engine: TestEngine | None = None,
    facility: CoverageFacility | None = None,
) -> list[RunReport]:
    """Parse args and run every app of the project in turn.

    The first failing app halts the run.
    """
    options = parse_options(args)

    reports = []
    for app in apps or resolve_apps(project_root):
        logger.info(f"==> {app}")
        paths = BuildPaths.from_env(project_root, app)
        reports.append(execute(options, paths, engine=engine, facility=facility))

    return reports
