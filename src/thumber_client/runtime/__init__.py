"""
Runtime support for the Thumber client: the error model.
"""

from .errors import (
    ErrorCode,
    ThumberError,
    MalformedPayloadError,
    ValidationError,
    InvalidTransactionError,
    InvalidSignatureError,
    TransportError,
    PreconditionViolation,
)

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
