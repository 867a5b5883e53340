"""
HTTP transport for the Thumber API.

Thin wrapper over a ``requests.Session`` exposing the single call the client
needs. Retry, backoff and TLS policy are left to the session; a failed call is
reported once as a TransportError.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import requests

from ..runtime.errors import TransportError


logger = logging.getLogger(__name__)


@dataclass
class TransportResult:
    """Outcome of a completed HTTP exchange."""
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    final_url: str = ""


class HttpTransport:
    """
    requests-based transport.

    Any object with the same ``send`` signature can stand in for this one.
    """

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True,
                 user_agent: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            user_agent: User-Agent header sent with every request
            session: Session to use instead of a new one
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._session = session or requests.Session()
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

    def send(self, method: str, url: str, headers: Optional[Dict[str, str]] = None,
             body: Union[str, bytes, None] = None) -> TransportResult:
        """
        Perform one HTTP exchange.

        Args:
            method: GET or POST
            url: Target URL
            headers: Request headers
            body: Request body (ignored for GET)

        Returns:
            TransportResult

        Raises:
            TransportError: On any network failure
        """
        method = method.upper()
        if method != "POST" or not body:
            body = None

        try:
            response = self._session.request(
                method,
                url,
                headers=headers or {},
                data=body,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}",
                                 details={"url": url}, cause=e) from e

        return TransportResult(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
            final_url=response.url,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
