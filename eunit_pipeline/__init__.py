"""
eunit pipeline

Runs the unit tests of an app's compiled modules with pytest,
optionally measuring coverage, as a build-tool task or an MCP tool.
"""

__version__ = "0.1.0"

# Public API
from .core import RunOptions, RunReport, TestsFailed, execute, run

__all__ = [
    "__version__",
    "execute",
    "run",
    "RunOptions",
    "RunReport",
    "TestsFailed",
]
