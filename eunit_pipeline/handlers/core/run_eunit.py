"""
Run EUnit Tool - run an app's compiled test modules with pytest.

This tool:
1. Takes a project root and the task flags
2. Discovers the compiled modules of each app under _build/<profile>/<app>/lib
3. Runs them through pytest, optionally with coverage
4. Reports pass/fail and the artifacts written

Uses ExecutionService for business logic.
"""

from __future__ import annotations

import asyncio
import sys
import threading
from contextlib import redirect_stdout

from mcp.types import TextContent, Tool

from ...services import ExecutionService, ServiceResult, create_execution_service

# pytest, sys.path and the coverage session are process-wide
_run_lock = threading.Lock()

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="run_eunit",
    description=(
        "Run the unit tests of a project's compiled modules with pytest. "
        "Optionally restricts the run to named modules, writes a JUnit XML "
        "report and exports coverage data."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "project_root": {
                "type": "string",
                "description": "Project directory containing the _build output"
            },
            "app": {
                "type": "string",
                "description": "App to test (defaults to the project's apps)"
            },
            "verbose": {
                "type": "boolean",
                "description": "Enable verbose pytest output"
            },
            "surefire": {
                "type": "boolean",
                "description": "Write a JUnit XML report to the app output root"
            },
            "cover": {
                "type": "boolean",
                "description": "Measure coverage and export it as eunit.coverdata"
            },
            "modules": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Only run these modules"
            }
        },
        "required": ["project_root"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """
    Handle run_eunit tool call.

    Args:
        arguments: Tool arguments (project_root, app, flags, modules)

    Returns:
        List with single TextContent containing the run results
    """
    service = create_execution_service()

    # Off the event loop so the server keeps answering while tests run
    result = await asyncio.to_thread(_run_service, service, arguments)

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=format_run_reports(result.data))]


def to_task_args(arguments: dict) -> list[str]:
    """Translate tool arguments into eunit command-line flags."""
    args = []
    for flag in ("verbose", "surefire", "cover"):
        if arguments.get(flag):
            args.append(f"--{flag}")
    for module in arguments.get("modules") or []:
        args.extend(["--module", module])
    return args


# =============================================================================
# Response Formatting
# =============================================================================

def format_run_reports(reports) -> str:
    """Format run reports as readable text."""
    lines = [
        "EUNIT RESULTS",
        "=" * 50,
        "",
        "✅ All tests passed!",
    ]

    for report in reports:
        lines.extend([
            "",
            f"App: {report.app}",
            f"  • Modules run: {len(report.modules)} of {len(report.discovered)} discovered",
        ])
        for name in report.modules:
            lines.append(f"  ✓ {name}")

        if report.report:
            lines.append(f"  • Report: {report.report}")
        if report.coverdata:
            lines.append(f"  • Coverage data: {report.coverdata}")
        if report.export_error:
            lines.append(f"  • Coverage export failed: {report.export_error}")

    return "\n".join(lines)


# =============================================================================
# Helpers
# =============================================================================

def _run_service(service: ExecutionService, arguments: dict) -> ServiceResult:
    """Run the task with stdout, which carries the MCP stream, sent to stderr."""
    app = arguments.get("app")

    with _run_lock, redirect_stdout(sys.stderr):
        return service.run(
            project_root=arguments.get("project_root", ""),
            args=to_task_args(arguments),
            apps=[app] if app else None,
        )


def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
