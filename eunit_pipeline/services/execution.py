"""Test execution service.

Runs the eunit task for a project and returns its RunReports in a ServiceResult.
"""


from __future__ import annotations

from pathlib import Path

from ..core.runner import (
    CoverageCompileError,
    CoverageFacility,
    EunitError,
    InvalidArgument,
    RunReport,
    TestEngine,
    TestEngineError,
    TestsFailed,
    run,
)
from .base import ErrorCode, ServiceResult


class ExecutionService:
    """Run the eunit task and translate its exceptions into error codes."""

    def __init__(
        self,
        engine: TestEngine | None = None,
        facility: CoverageFacility | None = None,
    ):
        self._engine = engine
        self._facility = facility

    def run(
        self,
        project_root: str | Path | None,
        args: list[str],
        apps: list[str] | None = None,
    ) -> ServiceResult[list[RunReport]]:
        """Run tests for every app of the project with the given task flags."""

        # Step 1: Validate inputs
        if not project_root or not str(project_root).strip():
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                "'project_root' is required and cannot be empty"
            )

        root = Path(project_root)
        if not root.is_dir():
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                f"Project root not found: {root}",
                details={"project_root": str(root)}
            )

        # Step 2: Run the task
        try:
            reports = run(
                args,
                root,
                apps=apps,
                engine=self._engine,
                facility=self._facility,
            )
        except InvalidArgument as e:
            return ServiceResult.fail(ErrorCode.INVALID_ARGUMENT, str(e))
        except CoverageCompileError as e:
            return ServiceResult.fail(
                ErrorCode.COVERAGE_COMPILE_ERROR,
                str(e),
                details={"path": str(e.path), "reason": e.reason}
            )
        except TestsFailed as e:
            return ServiceResult.fail(ErrorCode.TESTS_FAILED, str(e))
        except TestEngineError as e:
            return ServiceResult.fail(ErrorCode.ENGINE_ERROR, str(e))
        except EunitError as e:
            return ServiceResult.fail(ErrorCode.INTERNAL_ERROR, str(e))

        return ServiceResult.ok(reports)
