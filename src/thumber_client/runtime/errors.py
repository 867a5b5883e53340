"""
Thumber Error Model

This module provides the error handling framework for the Thumber Python client.
Every failure the protocol layer reports is a ThumberError carrying an ErrorCode,
a message, optional details (typically the raw payload) and an optional cause.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Thumber client error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    MALFORMED_PAYLOAD = 100

    # Network errors (200-299)
    TRANSPORT_ERROR = 200

    # Authentication errors (300-399)
    INVALID_SIGNATURE = 302

    # Transaction errors (400-499)
    INVALID_TRANSACTION = 400
    PRECONDITION_VIOLATION = 401


class ThumberError(Exception):
    """
    Base class for all Thumber client errors.

    Provides structured error information so callers can log or debug
    a rejected transaction.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Thumber error.

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
        text = f"[{self.code.name}] {self.message}"
        if self.cause:
            text += f" (caused by {type(self.cause).__name__}: {self.cause})"
        return text


class MalformedPayloadError(ThumberError):
    """Wire text that is not a flat JSON object of correctly typed fields."""

    def __init__(self, message: str = "Malformed payload",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_PAYLOAD, details, cause)


class ValidationError(ThumberError):
    """A parsed transaction that failed validation."""
    pass


class InvalidTransactionError(ValidationError):
    """Structurally incomplete transaction, or a response whose success/error pair disagrees."""

    def __init__(self, message: str = "Invalid transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_TRANSACTION, details, cause)


class InvalidSignatureError(ValidationError):
    """Checksum present but not matching the recomputed value."""

    def __init__(self, message: str = "Invalid signature",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_SIGNATURE, details, cause)


class TransportError(ThumberError):
    """Network failure reported by the transport; never retried."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, details, cause)


class PreconditionViolation(ThumberError):
    """A request that is still invalid after stamping. Indicates a programming error."""

    def __init__(self, message: str = "Invalid request provided",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.PRECONDITION_VIOLATION, details, cause)


__all__ = [
    "ErrorCode",
    "ThumberError",
    "MalformedPayloadError",
    "ValidationError",
    "InvalidTransactionError",
    "InvalidSignatureError",
    "TransportError",
    "PreconditionViolation",
]
