"""Core domain logic for the eunit task."""


from .runner import (
    BuildPaths,
    EunitError,
    RunOptions,
    RunReport,
    TestsFailed,
    Verdict,
    execute,
    parse_options,
    run,
)

__all__ = [
    # Runner
    "execute",
    "run",
    "parse_options",
    "RunOptions",
    "RunReport",
    "Verdict",
    "BuildPaths",
    # Errors
    "EunitError",
    "TestsFailed",
]
