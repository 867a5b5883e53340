"""
Thumber transaction model: the signed envelope, requests and responses.
"""

from .payload import Payload
from .transaction import Transaction
from .request import Request
from .response import Response

__all__ = [
    "Payload",
    "Transaction",
    "Request",
    "Response",
]
