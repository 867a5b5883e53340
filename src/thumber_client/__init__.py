"""
Thumber Python Client

Signed request/response protocol for the Thumber remote thumbnail service:
requests are signed with the account secret and sent to the service, which
later POSTs a signed response carrying the thumbnail or an error.
"""

__version__ = "1.0.0"

from .runtime.errors import *
from .codec import FieldNameCodec, to_internal_name, to_wire_name, generate_nonce
from .canonical import canonical_query, canonical_bytes
from .signers import HmacSigner, canonical_form
from .tx import Payload, Transaction, Request, Response
from .config import ClientConfig
from .transport import HttpTransport, TransportResult
from .api_client import ThumberClient, SendResult

__all__ = [
    # Client
    "ThumberClient",
    "SendResult",
    "ClientConfig",
    "HttpTransport",
    "TransportResult",

    # Transactions
    "Payload",
    "Transaction",
    "Request",
    "Response",

    # Signing and codec
    "HmacSigner",
    "canonical_form",
    "canonical_query",
    "canonical_bytes",
    "FieldNameCodec",
    "to_internal_name",
    "to_wire_name",
    "generate_nonce",

    # Errors
    "ErrorCode",
    "ThumberError",
    "MalformedPayloadError",
    "ValidationError",
    "InvalidTransactionError",
    "InvalidSignatureError",
    "TransportError",
    "PreconditionViolation",
]
