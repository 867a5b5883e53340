"""
Hash Functions

HMAC-SHA256 used for transaction checksums and the MD5-based nonce generator.
"""

import hashlib
import hmac
import time
from typing import Union


def _key_bytes(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode('utf-8')


def hmac_sha256(secret: Union[str, bytes], message: bytes) -> bytes:
    """
    Compute HMAC-SHA256 of a message.

    Args:
        secret: Shared secret (text secrets are UTF-8 encoded)
        message: Bytes to authenticate

    Returns:
        Raw digest (32 bytes)
    """
    return hmac.new(_key_bytes(secret), message, hashlib.sha256).digest()


def digests_equal(a: bytes, b: bytes) -> bool:
    """Constant-time digest comparison."""
    return hmac.compare_digest(a, b)


def generate_nonce() -> str:
    """
    Generate a correlation nonce from the current wall-clock time.

    The nonce links a request to its eventual response; it is not a
    security primitive.

    Returns:
        32-character lowercase hex MD5 digest
    """
    return hashlib.md5(str(time.time_ns()).encode('ascii')).hexdigest()
