"""
Schemas
File: errors.py

Purpose: Standard error taxonomy for CID construction and decoding.
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

    # Decode Errors
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
    INVALID_SIZE = "INVALID_SIZE"
    INVALID_HASH = "INVALID_HASH"
    INVALID_ENCODING = "INVALID_ENCODING"

    # Builder Errors
    BUILDER_FINALIZED = "BUILDER_FINALIZED"

    # File Errors
    FILE_MODIFIED = "FILE_MODIFIED"

    # Verification Errors
    BLOCK_PROOF_INVALID = "BLOCK_PROOF_INVALID"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class AnysError(BaseModel):
    """
    Base error model for structured error communication.

    Used by the CLI for machine-readable error output, so that a failure
    can be serialized without carrying a live exception around.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_HASH],
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

    def to_exception(self) -> "AnysException":
        """Convert this error model to a raised exception."""
        return AnysException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AnysException(Exception):
    """
    Base exception for all anys-cid errors.

    This exception carries structured error information and can be
    converted to/from AnysError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "ANYS_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AnysError:
        """Convert this exception to an AnysError model."""
        return AnysError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CidDecodeException(AnysException):
    """Base exception for binary and string CID decoding failures."""

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details=details,
            retryable=False,
        )


class UnsupportedVersionException(CidDecodeException):
    """Exception raised when a CID carries a version tag the codec does not implement."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(
            message=f"unsupported version: {version}",
            code=ErrorCodes.UNSUPPORTED_VERSION,
            details={"version": version},
        )


class InvalidSizeException(CidDecodeException):
    """Exception raised when the size varint is truncated or overflows."""

    def __init__(self, message: str = "invalid size") -> None:
        super().__init__(message=message, code=ErrorCodes.INVALID_SIZE)


class InvalidHashException(CidDecodeException):
    """Exception raised when the bytes after the size are not exactly one hash wide."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            message=f"invalid hash: expected 32 bytes, got {length}",
            code=ErrorCodes.INVALID_HASH,
            details={"length": length},
        )


class InvalidEncodingException(CidDecodeException):
    """Exception raised when a CID string payload is not valid base-58."""

    def __init__(self, message: str = "invalid encoding") -> None:
        super().__init__(message=message, code=ErrorCodes.INVALID_ENCODING)


class BuilderFinalizedException(AnysException):
    """Exception raised when a CidBuilder is used after finalize()."""

    def __init__(self) -> None:
        super().__init__(
            message="builder already finalized",
            code=ErrorCodes.BUILDER_FINALIZED,
            retryable=False,
        )


class FileModifiedException(AnysException):
    """Exception raised when a file's modification time changed while it was hashed."""

    def __init__(
        self,
        path: str | None = None,
        before_ns: int | None = None,
        after_ns: int | None = None,
    ) -> None:
        self.path = path
        details: dict[str, Any] = {}
        if path:
            details["path"] = path
        if before_ns is not None:
            details["modified_before_ns"] = before_ns
        if after_ns is not None:
            details["modified_after_ns"] = after_ns
        target = path or "file"
        super().__init__(
            message=f"{target} modified while reading",
            code=ErrorCodes.FILE_MODIFIED,
            details=details,
            retryable=False,
        )


class BlockProofException(AnysException):
    """Exception raised when a block proof is structurally invalid."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if leaf_index is not None:
            details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.BLOCK_PROOF_INVALID,
            details=details,
            retryable=False,
        )
