"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy across the tree builder.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Digest Provider Errors
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Input Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_INPUT = "INVALID_INPUT"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleForgeError(BaseModel):
    """
    Base error model for structured error reporting.

    Used by the CLI to print failures as JSON without losing the
    machine-readable code or the details attached by the raising function.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleForgeException":
        """Convert this error model to a raised exception."""
        return MerkleForgeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleForgeException(Exception):
    """
    Base exception for all tree builder errors.

    Carries structured error information and can be converted
    to/from MerkleForgeError models. Deliberately not a ValueError:
    raised inside a pydantic validator it propagates unchanged.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLEFORGE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleForgeError:
        """Convert this exception to a MerkleForgeError model."""
        return MerkleForgeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnsupportedAlgorithmException(MerkleForgeException):
    """Exception raised for an algorithm identifier outside the supported set."""

    def __init__(
        self,
        message: str,
        algorithm: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if algorithm is not None:
            full_details["algorithm"] = str(algorithm)
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details=full_details,
            retryable=False,
        )


class EmptyInputException(MerkleForgeException):
    """Exception raised when a tree is requested over zero leaves."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class InvalidInputException(MerkleForgeException):
    """Exception raised when an argument has the wrong shape or value."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=full_details,
            retryable=False,
        )
