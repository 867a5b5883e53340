"""
Tests for the error model.
"""

from thumber_client.runtime.errors import (
    ErrorCode,
    InvalidSignatureError,
    InvalidTransactionError,
    MalformedPayloadError,
    PreconditionViolation,
    ThumberError,
    TransportError,
    ValidationError,
)


def test_codes():
    assert MalformedPayloadError().code == ErrorCode.MALFORMED_PAYLOAD
    assert InvalidTransactionError().code == ErrorCode.INVALID_TRANSACTION
    assert InvalidSignatureError().code == ErrorCode.INVALID_SIGNATURE
    assert TransportError("down").code == ErrorCode.TRANSPORT_ERROR
    assert PreconditionViolation().code == ErrorCode.PRECONDITION_VIOLATION


def test_hierarchy():
    assert issubclass(InvalidTransactionError, ValidationError)
    assert issubclass(InvalidSignatureError, ValidationError)
    for cls in (MalformedPayloadError, ValidationError, TransportError, PreconditionViolation):
        assert issubclass(cls, ThumberError)


def test_str_includes_cause():
    error = MalformedPayloadError("bad json", details={"payload": "{"}, cause=ValueError("eof"))
    assert str(error) == "[MALFORMED_PAYLOAD] bad json (caused by ValueError: eof)"


def test_details_kept_out_of_message():
    """The raw payload stays on the error for logging but is not echoed in str()."""
    error = InvalidSignatureError(details={"payload": "{\"nonce\":\"abc\"}"})
    assert error.details == {"payload": "{\"nonce\":\"abc\"}"}
    assert str(error) == "[INVALID_SIGNATURE] Invalid signature"


def test_details_default_empty():
    assert TransportError("down").details == {}
