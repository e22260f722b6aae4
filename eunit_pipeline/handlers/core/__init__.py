"""Registry for core MCP tool definitions and handlers."""

# Tool definitions and handlers
from .run_eunit import (
    TOOL_DEFINITION as RUN_EUNIT_TOOL,
    handle as handle_run_eunit,
)


# All Core tool definitions
TOOLS = [
    RUN_EUNIT_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "run_eunit": handle_run_eunit,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "RUN_EUNIT_TOOL",
    # Handlers
    "HANDLERS",
    "handle_run_eunit",
]
