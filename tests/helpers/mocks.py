"""
Mock implementations for testing.

Provides a transport and a response handler with configurable behavior for
testing the client without a network.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import requests

from thumber_client.runtime.errors import TransportError
from thumber_client.transport.http import TransportResult


class MockTransport:
    """
    Transport that records every send and replies from a script.
    """

    def __init__(self, status_code: int = 200, body: str = '{"success":true}'):
        self.status_code = status_code
        self.body = body
        self.sent: List[Dict[str, Any]] = []
        self.fail_with: Optional[Exception] = None

    def set_response(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body

    def set_failure(self, message: str = "Mock network error") -> None:
        cause = requests.ConnectionError(message)
        self.fail_with = TransportError(message, cause=cause)

    def send(self, method, url, headers=None, body=None) -> TransportResult:
        self.sent.append({
            "method": method,
            "url": url,
            "headers": dict(headers or {}),
            "body": body,
        })
        if self.fail_with is not None:
            raise self.fail_with
        return TransportResult(
            status_code=self.status_code,
            body=self.body,
            headers={"Content-Type": "application/json"},
            final_url=url,
        )

    @property
    def last(self) -> Dict[str, Any]:
        return self.sent[-1]


class RecordingHandler:
    """Application response handler that remembers what it was given."""

    def __init__(self):
        self.responses = []

    def __call__(self, resp) -> None:
        self.responses.append(resp)
