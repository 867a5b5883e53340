"""
Canonical form of a transaction's wire fields.

Produces the deterministic byte string both endpoints feed into HMAC-SHA256:

1. drop the ``checksum`` entry
2. render every value as text and keep at most its first 1024 characters
3. sort by wire field name (plain code point order)
4. percent-encode keys and values (RFC 3986 unreserved characters kept,
   space as ``%20``) and join as ``key=value`` pairs with ``&``
"""

from typing import Any, Dict, List, Tuple
from urllib.parse import quote

CHECKSUM_FIELD = "checksum"
MAX_VALUE_LENGTH = 1024


def value_text(value: Any) -> str:
    """
    Render a wire value as text the way the service does.

    Booleans are ``"1"``/``""``; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def canonical_items(wire: Dict[str, Any]) -> List[Tuple[str, str]]:
    """
    Sorted, truncated (key, text) pairs of a wire map, without the checksum.

    Args:
        wire: Flat wire-form mapping

    Returns:
        List of (wire name, truncated text value) pairs
    """
    items = [
        (key, value_text(value)[:MAX_VALUE_LENGTH])
        for key, value in wire.items()
        if key != CHECKSUM_FIELD and value is not None
    ]
    items.sort(key=lambda kv: kv[0])
    return items


def canonical_query(wire: Dict[str, Any]) -> str:
    """
    Build the canonical query string for a wire map.

    Args:
        wire: Flat wire-form mapping

    Returns:
        ``key=value&key=value`` text, RFC 3986 percent-encoded
    """
    return "&".join(
        f"{quote(key, safe='')}={quote(text, safe='')}"
        for key, text in canonical_items(wire)
    )


def canonical_bytes(wire: Dict[str, Any]) -> bytes:
    """Canonical form as the bytes that get signed."""
    return canonical_query(wire).encode('ascii')
