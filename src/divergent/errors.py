"""Errors synthesized by the Try and Maybe containers.

Errors raised by user callbacks are never wrapped; these types only cover the
cases where the containers themselves have to produce an error.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable codes for container-synthesized errors."""
    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"
    PREDICATE_FAILED = "PREDICATE_FAILED"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    UNKNOWN = "UNKNOWN"


class DivergentError(Exception):
    """Base exception for errors raised by divergent itself."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


class NoSuchElementError(DivergentError, LookupError):
    """Raised when a value is requested from an empty container.

    Also carried by the Failure produced when Try.filter's predicate does not hold.
    """

    code = ErrorCode.NO_SUCH_ELEMENT


class UnsupportedOperationError(DivergentError):
    """Raised (wrapped in a Failure) when Success.failed() is called."""

    code = ErrorCode.UNSUPPORTED_OPERATION
