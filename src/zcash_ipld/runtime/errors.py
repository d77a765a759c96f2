"""
Zcash IPLD Error Model

Typed failures for the transaction codec and the path resolver. Every
unrecognized path segment, out-of-range index or truncated buffer surfaces as
one of these; none of them are transient, so none are retryable.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for codec and navigation failures."""

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    MALFORMED_INPUT = 101
    UNSUPPORTED_CODEC = 102
    HASH_MISMATCH = 103

    # Path errors (200-299)
    PATH_ERROR = 200
    INDEX_OUT_OF_RANGE = 201
    NO_SUCH_LINK = 202
    WRONG_TYPE = 203


class ZcashIpldError(Exception):
    """
    Base class for all zcash-ipld errors.

    Carries a machine-readable code and optional structured details.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(ZcashIpldError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MalformedInputError(EncodingError):
    """Truncated varint, short fixed-size field, or otherwise undecodable bytes."""

    def __init__(self, message: str = "Malformed input",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_INPUT, details, cause)


class HashMismatchError(MalformedInputError):
    """Block data does not hash to the digest its CID names."""

    def __init__(self, message: str = "Data does not match CID",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, details, cause)
        self.code = ErrorCode.HASH_MISMATCH


class UnsupportedCodecError(EncodingError):
    """No node decoder is registered for a multicodec tag."""

    def __init__(self, message: str = "Unsupported codec",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_CODEC, details, cause)


class PathError(ZcashIpldError):
    """Path resolution errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PATH_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class IndexOutOfRangeError(PathError):
    """Index segment is not an integer or falls outside the sequence."""

    def __init__(self, message: str = "index out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INDEX_OUT_OF_RANGE, details, cause)


class NoSuchLinkError(PathError):
    """Segment is not recognized at its position, or names an absent link."""

    def __init__(self, message: str = "no such link",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NO_SUCH_LINK, details, cause)


class WrongTypeError(PathError):
    """A resolved value was requested as a link but is not one."""

    def __init__(self, message: str = "value was not a link",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.WRONG_TYPE, details, cause)


class ErrorHandler:
    """
    Utility class for categorizing errors.
    """

    @staticmethod
    def is_path_error(error: Exception) -> bool:
        """Check whether an error came from path resolution."""
        return isinstance(error, PathError)

    @staticmethod
    def is_decode_error(error: Exception) -> bool:
        """Check whether an error came from decoding raw bytes."""
        return isinstance(error, EncodingError)


__all__ = [
    "ErrorCode",
    "ZcashIpldError",
    "EncodingError",
    "MalformedInputError",
    "HashMismatchError",
    "UnsupportedCodecError",
    "PathError",
    "IndexOutOfRangeError",
    "NoSuchLinkError",
    "WrongTypeError",
    "ErrorHandler",
]
