"""Coverage session handling around a test run.

The measurement state lives in coverage.py and is process-wide, so it is
wrapped in a CoverageSession handle: acquire() stops whatever was left
running and starts fresh, release() always stops it again.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, TypeVar

import coverage

from ...constants import NON_MODULE_FILES, UNIT_EXTENSION
from .errors import CoverageCompileError, CoverageExportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CoverageFacility(ABC):
    """start/stop/instrument/export operations of a coverage backend."""

    @property
    @abstractmethod
    def running(self) -> bool:
        """Whether a session is currently open."""

    @abstractmethod
    def start(self) -> None:
        """Open a fresh session."""

    @abstractmethod
    def stop(self) -> None:
        """Close the session; a no-op when none is open."""

    @abstractmethod
    def instrument(self, directory: Path) -> None:
        """Measure every unit under directory. Raises CoverageCompileError."""

    @abstractmethod
    def export(self, path: Path) -> None:
        """Write accumulated data to path. Raises CoverageExportError."""


class PythonCoverage(CoverageFacility):
    """CoverageFacility backed by coverage.Coverage."""

    # Shared by every instance: one measurement per process
    _active: coverage.Coverage | None = None

    def __init__(self):
        self._open = False

    @property
    def running(self) -> bool:
        return self._open or PythonCoverage._active is not None

    def start(self) -> None:
        self._open = True

    def stop(self) -> None:
        cov = PythonCoverage._active
        PythonCoverage._active = None
        self._open = False
        if cov is not None:
            cov.stop()

    def instrument(self, directory: Path) -> None:
        directory = Path(directory)
        if not directory.is_dir():
            raise CoverageCompileError(directory, "directory does not exist")

        for unit in sorted(directory.glob(f"*{UNIT_EXTENSION}")):
            if unit.name in NON_MODULE_FILES:
                continue
            try:
                compile(unit.read_text(encoding="utf-8"), str(unit), "exec")
            except (SyntaxError, ValueError, OSError) as e:
                raise CoverageCompileError(directory, f"{unit.name}: {e}") from e

        cov = coverage.Coverage(data_file=None, source=[str(directory)])
        cov.start()
        PythonCoverage._active = cov

    def export(self, path: Path) -> None:
        path = Path(path)
        cov = PythonCoverage._active
        if cov is None:
            raise CoverageExportError(path, "no coverage session is running")

        try:
            data = coverage.CoverageData(basename=str(path))
            data.erase()
            data.update(cov.get_data())
            data.write()
        except (OSError, coverage.CoverageException) as e:
            raise CoverageExportError(path, str(e)) from e


class CoverageSession:
    """Resource handle for one coverage session (start -> use -> always stop)."""

    def __init__(self, facility: CoverageFacility):
        self.facility = facility
        self.export_error: CoverageExportError | None = None

    def acquire(self) -> CoverageSession:
        self.facility.stop()
        self.facility.start()
        return self

    def release(self) -> None:
        self.facility.stop()

    def __enter__(self) -> CoverageSession:
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def run_coverage_scoped(
    compile_path: Path,
    action: Callable[[], T],
    facility: CoverageFacility,
    coverdata: Path,
    session: CoverageSession | None = None,
) -> T:
    """Run action with coverage measured over compile_path.

    Data is exported to coverdata whether action returns or raises. An export
    failure never replaces an exception raised by action; after a normal
    return it is logged and kept on session.export_error.
    """
    session = session or CoverageSession(facility)

    with session:
        facility.instrument(compile_path)

        try:
            result = action()
        except BaseException:
            try:
                facility.export(coverdata)
            except CoverageExportError as export_error:
                logger.info(str(export_error))
            raise

        try:
            facility.export(coverdata)
        except CoverageExportError as export_error:
            logger.warning(str(export_error))
            session.export_error = export_error
        else:
            logger.info(f"Coverage data written to {coverdata}")

        return result
