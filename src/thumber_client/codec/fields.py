"""
Field name codec.

Translates between the camelCase identifiers a transaction model declares for
its fields and the underscore-delimited names used on the wire:

    mimeType  <->  mime_type

Both directions are exact inverses for identifiers made of ASCII letters and
digits whose word boundaries are a lowercase letter followed by an uppercase one.
"""

from __future__ import annotations
import re
from typing import Any, Dict, Iterable, Iterator, Tuple

_WORD_BOUNDARY = re.compile(r'([a-z])([A-Z])')
_UNDERSCORE_LETTER = re.compile(r'_([A-Za-z])')


def to_wire_name(name: str) -> str:
    """
    Convert an internal (camelCase) identifier to its wire form.

    Args:
        name: Internal identifier, e.g. ``mimeType``

    Returns:
        Wire identifier, e.g. ``mime_type``
    """
    return _WORD_BOUNDARY.sub(r'\1_\2', name).lower()


def to_internal_name(name: str) -> str:
    """
    Convert a wire (underscore) identifier to its internal form.

    Args:
        name: Wire identifier, e.g. ``mime_type``

    Returns:
        Internal identifier, e.g. ``mimeType``
    """
    return _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), name)


class FieldNameCodec:
    """
    Name mapping bound to one model's set of internal field names.

    Encoding renames every key; decoding renames every key and drops the
    ones the model does not declare.
    """

    def __init__(self, internal_names: Iterable[str]):
        self.internal_names = frozenset(internal_names)

    def encode_keys(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Rename internal keys to wire keys, preserving order."""
        return {to_wire_name(k): v for k, v in values.items()}

    def decode_keys(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Rename wire keys to internal keys; unknown keys are ignored."""
        return dict(self._known(values.items()))

    def _known(self, items: Iterable[Tuple[str, Any]]) -> Iterator[Tuple[str, Any]]:
        for key, value in items:
            name = to_internal_name(key)
            if name in self.internal_names:
                yield name, value

    def __repr__(self) -> str:
        return f"FieldNameCodec({sorted(self.internal_names)!r})"
