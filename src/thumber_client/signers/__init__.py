"""
Transaction signers.
"""

from .hmac_signer import HmacSigner, SignableTransaction, canonical_form

__all__ = [
    "HmacSigner",
    "SignableTransaction",
    "canonical_form",
]
