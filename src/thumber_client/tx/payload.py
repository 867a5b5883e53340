"""
Binary payload with base64 and raw views.

A Payload is built from exactly one authoritative representation; the other
view is derived on first access and cached. Instances are immutable: to change
a transaction's payload, assign a new Payload.
"""

from __future__ import annotations
import base64
import binascii
from typing import Optional

from ..runtime.errors import MalformedPayloadError


class Payload:
    """Immutable binary payload with lazily derived encoded/decoded views."""

    __slots__ = ("_encoded", "_decoded")

    def __init__(self, encoded: Optional[str] = None, decoded: Optional[bytes] = None):
        if (encoded is None) == (decoded is None):
            raise ValueError("Payload needs exactly one of encoded or decoded")
        self._encoded = encoded
        self._decoded = decoded

    @classmethod
    def from_encoded(cls, encoded: str) -> Payload:
        """Create a payload from base64 text."""
        if not isinstance(encoded, str):
            raise TypeError(f"encoded payload must be str, got {type(encoded).__name__}")
        return cls(encoded=encoded)

    @classmethod
    def from_decoded(cls, decoded: bytes) -> Payload:
        """Create a payload from raw bytes."""
        if not isinstance(decoded, (bytes, bytearray)):
            raise TypeError(f"decoded payload must be bytes, got {type(decoded).__name__}")
        return cls(decoded=bytes(decoded))

    @property
    def encoded(self) -> str:
        """Base64 text (standard alphabet, padded)."""
        if self._encoded is None:
            self._encoded = base64.b64encode(self._decoded).decode('ascii')
        return self._encoded

    @property
    def decoded(self) -> bytes:
        """
        Raw bytes.

        Raises:
            MalformedPayloadError: If the encoded text is not valid base64
        """
        if self._decoded is None:
            try:
                self._decoded = base64.b64decode(self._encoded, validate=True)
            except (binascii.Error, ValueError) as e:
                raise MalformedPayloadError(
                    "Payload data is not valid base64", cause=e
                ) from e
        return self._decoded

    def __bool__(self) -> bool:
        """True when the encoded view is non-empty."""
        return len(self.encoded) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Payload):
            return NotImplemented
        return self.encoded == other.encoded

    def __hash__(self) -> int:
        return hash(self.encoded)

    def __repr__(self) -> str:
        if self._encoded is not None:
            return f"Payload(encoded={len(self._encoded)} chars)"
        return f"Payload(decoded={len(self._decoded)} bytes)"
