"""
HMAC-SHA256 signer for Thumber transactions.

Signs and verifies the canonical form of a transaction's wire fields with the
account's shared secret. Requests are signed by the client; responses are
signed by the service and verified here with the same secret.
"""

from __future__ import annotations
from typing import Any, Dict, Protocol, Union

from ..canonical import canonical_bytes
from ..codec.hashes import digests_equal, hmac_sha256


class SignableTransaction(Protocol):
    """Anything exposing a flat wire map and a checksum."""

    checksum: Any

    def to_wire(self) -> Dict[str, Any]:
        ...


def canonical_form(transaction: SignableTransaction) -> bytes:
    """
    Canonical bytes of a transaction, excluding its checksum.

    Args:
        transaction: Transaction to canonicalize

    Returns:
        ASCII bytes used as HMAC input
    """
    return canonical_bytes(transaction.to_wire())


class HmacSigner:
    """
    Checksum signer bound to a shared secret.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(self, secret: Union[str, bytes]):
        """
        Initialize the signer.

        Args:
            secret: The user secret shared with the service
        """
        self._secret = secret

    def sign(self, transaction: SignableTransaction) -> bytes:
        """
        Compute the checksum for a transaction.

        Args:
            transaction: Transaction to sign (its current checksum is ignored)

        Returns:
            Raw 32-byte HMAC-SHA256 digest
        """
        return hmac_sha256(self._secret, canonical_form(transaction))

    def verify(self, transaction: SignableTransaction) -> bool:
        """
        Check a transaction's checksum against the recomputed one.

        Args:
            transaction: Transaction carrying a checksum

        Returns:
            True if the checksum matches byte for byte
        """
        checksum = transaction.checksum
        if not isinstance(checksum, bytes):
            return False
        return digests_equal(checksum, self.sign(transaction))

    def __repr__(self) -> str:
        return "HmacSigner(secret=***)"
