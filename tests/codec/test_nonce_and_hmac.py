"""
Tests for the hashing helpers.
"""

import hashlib
import hmac
import re

from thumber_client.codec.hashes import digests_equal, generate_nonce, hmac_sha256


def test_nonce_is_fixed_length_hex():
    nonce = generate_nonce()
    assert re.fullmatch(r"[0-9a-f]{32}", nonce)


def test_nonces_differ_over_time():
    nonces = {generate_nonce() for _ in range(50)}
    # time_ns() resolution makes collisions practically impossible, but
    # coarse clocks may repeat a few values
    assert len(nonces) > 1


def test_hmac_matches_stdlib():
    expected = hmac.new(b"key", b"message", hashlib.sha256).digest()
    assert hmac_sha256("key", b"message") == expected
    assert hmac_sha256(b"key", b"message") == expected
    assert len(expected) == 32


def test_digests_equal():
    a = hmac_sha256("k", b"m")
    assert digests_equal(a, bytes(a))
    assert not digests_equal(a, a[:-1] + bytes([a[-1] ^ 1]))
