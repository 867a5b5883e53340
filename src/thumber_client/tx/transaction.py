"""
Signed transaction envelope shared by requests and responses.

A transaction is a flat set of optional fields. Its wire form is a JSON object
keyed by underscore field names with unset fields omitted; its checksum is an
HMAC-SHA256 over the canonical form of every other field.

Validity progresses Unsigned -> Signed -> Verified/Rejected:

    req = Request(uid="u1", url="https://example.com/doc.pdf")
    req.set_nonce()
    req.timestamp = int(time.time())
    req.sign(secret)
    assert req.is_valid(secret)
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..codec.fields import FieldNameCodec
from ..codec.hashes import generate_nonce
from ..runtime.errors import (
    InvalidSignatureError,
    InvalidTransactionError,
    MalformedPayloadError,
)
from ..signers.hmac_signer import HmacSigner
from .payload import Payload

logger = logging.getLogger(__name__)

Secret = Union[str, bytes]


class Transaction(BaseModel):
    """
    Base envelope for Thumber requests and responses.

    Fields are declared with their internal (camelCase) identifier as alias;
    ``FieldNameCodec`` maps those to and from wire names. Not instantiated
    directly; use :class:`Request` or :class:`Response`.
    """

    nonce: Optional[str] = Field(
        default=None,
        description="Correlation id shared by a request and its response"
    )
    timestamp: Optional[int] = Field(
        default=None,
        strict=True,
        description="Unix time (seconds) the transaction was sent"
    )
    checksum: Optional[bytes] = Field(
        default=None,
        description="Raw HMAC-SHA256 digest; hex encoded on the wire"
    )
    data: Optional[Payload] = Field(
        default=None,
        description="Binary payload; base64 encoded on the wire"
    )

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "validate_assignment": True,
        "extra": "ignore",
    }

    def model_post_init(self, __context: Any) -> None:
        if type(self) is Transaction:
            raise TypeError("Transaction is a base class; use Request or Response")

    @field_validator('checksum', mode='before')
    @classmethod
    def parse_checksum(cls, v: Any) -> Optional[bytes]:
        """Accept raw digest bytes or their hex text."""
        if v is None or isinstance(v, bytes):
            return v
        if isinstance(v, str):
            return bytes.fromhex(v)
        raise ValueError(f"checksum must be bytes or hex string, got {type(v).__name__}")

    @field_validator('data', mode='before')
    @classmethod
    def parse_data(cls, v: Any) -> Optional[Payload]:
        """Accept a Payload, base64 text, or raw bytes."""
        if v is None or isinstance(v, Payload):
            return v
        if isinstance(v, str):
            payload = Payload.from_encoded(v)
            try:
                payload.decoded
            except MalformedPayloadError as e:
                raise ValueError("data is not valid base64") from e
            return payload
        if isinstance(v, (bytes, bytearray)):
            return Payload.from_decoded(v)
        raise ValueError(f"data must be base64 text or bytes, got {type(v).__name__}")

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def set_nonce(self, nonce: Optional[str] = None) -> None:
        """
        Set the nonce, generating one from the current time if none is given.

        Args:
            nonce: The nonce to use
        """
        self.nonce = nonce if nonce is not None else generate_nonce()

    @property
    def encoded_data(self) -> Optional[str]:
        """Base64 view of the payload, derived from raw data if needed."""
        return self.data.encoded if self.data is not None else None

    @encoded_data.setter
    def encoded_data(self, value: Optional[str]) -> None:
        self.data = Payload.from_encoded(value) if value is not None else None

    @property
    def decoded_data(self) -> Optional[bytes]:
        """Raw view of the payload, decoded from base64 if needed."""
        return self.data.decoded if self.data is not None else None

    @decoded_data.setter
    def decoded_data(self, value: Optional[bytes]) -> None:
        self.data = Payload.from_decoded(value) if value is not None else None

    def set_data_from_file(self, path: Union[str, Path]) -> None:
        """Use the contents of a local file as the raw payload."""
        self.decoded_data = Path(path).read_bytes()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def internal_field_names(cls) -> List[str]:
        """Internal identifiers of every declared field."""
        return [info.alias or name for name, info in cls.model_fields.items()]

    @classmethod
    def field_codec(cls) -> FieldNameCodec:
        return FieldNameCodec(cls.internal_field_names())

    def to_dict(self) -> Dict[str, Any]:
        """Set fields keyed by internal identifier, in declaration order."""
        result: Dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, Payload):
                value = value.encoded
            elif isinstance(value, bytes):
                value = value.hex()
            result[info.alias or name] = value
        return result

    def to_wire(self) -> Dict[str, Any]:
        """Flat wire mapping with underscore field names; unset fields omitted."""
        return self.field_codec().encode_keys(self.to_dict())

    def to_json(self) -> str:
        """Wire mapping as JSON text."""
        return json.dumps(self.to_wire())

    @classmethod
    def from_wire(cls, wire: Any):
        """
        Build an instance from a parsed wire mapping.

        Unknown keys are ignored.

        Raises:
            MalformedPayloadError: If ``wire`` is not a mapping or a known
                field has a value of the wrong type
        """
        if not isinstance(wire, dict):
            raise MalformedPayloadError(
                f"Expected a JSON object, got {type(wire).__name__}",
                details={"payload": wire},
            )
        try:
            return cls.model_validate(cls.field_codec().decode_keys(wire))
        except PydanticValidationError as e:
            raise MalformedPayloadError(
                f"Invalid {cls.__name__} fields",
                details={"payload": wire, "errors": e.errors(include_url=False)},
                cause=e,
            ) from e

    @classmethod
    def from_json(cls, raw: Union[str, bytes]):
        """
        Build an instance from wire JSON text.

        Raises:
            MalformedPayloadError: If the text is not valid JSON or not a
                valid wire object
        """
        try:
            wire = json.loads(raw)
        except (ValueError, TypeError) as e:
            raise MalformedPayloadError(
                "Provided JSON string is invalid",
                details={"payload": raw},
                cause=e,
            ) from e
        return cls.from_wire(wire)

    # ------------------------------------------------------------------
    # Signing and validation
    # ------------------------------------------------------------------

    def compute_checksum(self, secret: Secret) -> bytes:
        """
        Compute the checksum for the current field values.

        Args:
            secret: The user secret

        Returns:
            Raw 32-byte digest
        """
        return HmacSigner(secret).sign(self)

    def is_valid_checksum(self, secret: Secret) -> bool:
        """Whether the stored checksum matches the current field values."""
        return HmacSigner(secret).verify(self)

    def sign(self, secret: Secret) -> Transaction:
        """Compute and store the checksum. Returns self."""
        self.checksum = self.compute_checksum(secret)
        logger.debug(f"Signed {type(self).__name__} nonce={self.nonce}")
        return self

    def structural_issues(self) -> List[str]:
        """Missing envelope fields (nonce, timestamp, checksum)."""
        issues = []
        if self.nonce is None:
            issues.append("nonce is missing")
        if self.timestamp is None:
            issues.append("timestamp is missing")
        if self.checksum is None:
            issues.append("checksum is missing")
        return issues

    def validation_issues(self) -> List[str]:
        """
        Every problem that makes this transaction invalid regardless of secret.

        The envelope checks plus any rules a subclass adds on top of them.
        """
        return self.structural_issues()

    def is_structurally_valid(self) -> bool:
        """Whether nonce, timestamp and checksum are all present (no secret needed)."""
        return not self.structural_issues()

    def is_valid(self, secret: Optional[Secret] = None) -> bool:
        """
        Whether this instance is valid.

        Args:
            secret: The user secret. If given, validity includes checksum
                verification.
        """
        return not self.validation_issues() and (
            secret is None or self.is_valid_checksum(secret)
        )

    def ensure_valid(self, secret: Secret, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Raise unless this instance is valid under ``secret``.

        Raises:
            InvalidTransactionError: If required fields are missing or inconsistent
            InvalidSignatureError: If the checksum does not match
        """
        issues = self.validation_issues()
        if issues:
            raise InvalidTransactionError(
                f"Invalid {type(self).__name__}: {'; '.join(issues)}",
                details=details,
            )
        if not self.is_valid_checksum(secret):
            raise InvalidSignatureError(
                f"{type(self).__name__} checksum does not match its contents",
                details=details,
            )
