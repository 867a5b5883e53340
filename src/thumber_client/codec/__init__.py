"""
Thumber Codec Module

Key components:
- fields.py: camelCase <-> underscore field name mapping
- hashes.py: HMAC-SHA256 and nonce helpers
"""

from .fields import FieldNameCodec, to_internal_name, to_wire_name
from .hashes import digests_equal, generate_nonce, hmac_sha256

__all__ = [
    "FieldNameCodec",
    "to_internal_name",
    "to_wire_name",
    "digests_equal",
    "generate_nonce",
    "hmac_sha256",
]
