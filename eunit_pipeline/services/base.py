"""
Service Layer Base - result and error types shared by services.

This module provides:
- ServiceResult: success-with-data or failure-with-error
- ServiceError: structured error information
- ErrorCode: error codes a task outcome maps to
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Error codes for task outcomes (string values for JSON)."""
    # Input validation
    INVALID_ARGUMENT = "invalid_argument"
    MISSING_INPUT = "missing_input"

    # Coverage
    COVERAGE_COMPILE_ERROR = "coverage_compile_error"

    # Execution
    TESTS_FAILED = "tests_failed"
    ENGINE_ERROR = "engine_error"

    # General
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ServiceError:
    """
    Structured error information.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable error message
        details: Optional additional context
    """
    code: ErrorCode
    message: str
    details: dict | None = None


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Either success with data or failure with error, never both.

    Usage:
        result = service.run(project_root, args)
        if result.success:
            show(result.data)
        else:
            report(result.error)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            data=None,
            error=ServiceError(code=code, message=message, details=details)
        )
