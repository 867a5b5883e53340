"""
Transport layer for the Thumber client.

Provides the HTTP transport implementation.
"""

from .http import HttpTransport, TransportResult

__all__ = [
    "HttpTransport",
    "TransportResult",
]
