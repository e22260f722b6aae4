"""Data models for the eunit task."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Verdict(str, Enum):
    """Aggregate outcome returned by the test engine."""
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class RunOptions:
    """Validated command-line flags for one run."""
    verbose: bool = False
    surefire: bool = False
    cover: bool = False
    modules: tuple[str, ...] = ()


@dataclass
class RunReport:
    """Outcome of a passing run for one app."""
    app: str
    modules: list[str]
    verdict: Verdict
    coverdata: Path | None = None
    report: Path | None = None
    export_error: str | None = None
    discovered: list[str] = field(default_factory=list)
