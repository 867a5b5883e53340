"""
Thumber API Client

Sends signed thumbnail requests to the Thumber service and validates the
signed responses it later POSTs back to the configured callback URL.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Union

from .config import ClientConfig
from .runtime.errors import ThumberError, ValidationError
from .transport.http import HttpTransport
from .tx.request import Request
from .tx.response import Response


CREATE_PATH = "/create.json"
MIME_TYPES_PATH = "/mime_types.json"


@dataclass
class SendResult:
    """Result of submitting a request."""

    nonce: str
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    final_url: str = ""

    @property
    def ok(self) -> bool:
        """Whether the service accepted the request (2xx)."""
        return 200 <= self.status_code < 300


class ThumberClient:
    """
    Thumber API Client

    Provides:
    - Request stamping (uid, callback, timestamp, nonce, checksum)
    - Submission to the create endpoint
    - Webhook response validation and dispatch to the application handler
    - Supported MIME type lookup
    """

    def __init__(self, config: ClientConfig, transport=None):
        """
        Initialize the Thumber client.

        Args:
            config: Immutable client configuration
            transport: Object with a ``send(method, url, headers, body)``
                method; defaults to an HttpTransport built from ``config``
        """
        if not isinstance(config, ClientConfig):
            raise TypeError(f"config must be a ClientConfig, got {type(config).__name__}")
        self.config = config

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self.transport = transport or HttpTransport(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            user_agent=config.user_agent,
        )

    def _url(self, path: str) -> str:
        return self.config.endpoint.rstrip('/') + path

    def send_request(self, req: Request) -> SendResult:
        """
        Stamp and send a request to the create endpoint.

        The uid and callback are filled from configuration when empty; the
        timestamp, nonce (when empty) and checksum are always written.

        Args:
            req: The request to send

        Returns:
            SendResult with the request nonce and the HTTP outcome

        Raises:
            PreconditionViolation: If the stamped request is invalid
            TransportError: If the HTTP exchange fails
        """
        if not isinstance(req, Request):
            raise TypeError("Request must be of type Request.")

        req.prepare_for_send(self.config)
        body = req.to_json()
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body.encode('utf-8'))),
        }

        url = self._url(CREATE_PATH)
        self.logger.debug(f"Sending request nonce={req.nonce} to {url}")
        result = self.transport.send("POST", url, headers, body)
        self.logger.debug(f"Request nonce={req.nonce} -> HTTP {result.status_code}")

        return SendResult(
            nonce=req.nonce,
            status_code=result.status_code,
            body=result.body,
            headers=result.headers,
            final_url=result.final_url,
        )

    def receive_response(self, body: Union[str, bytes]) -> Response:
        """
        Validate a webhook body and hand it to the response handler.

        Whoever receives the webhook POST should pass its body here.

        Args:
            body: The raw POST body

        Returns:
            The validated Response

        Raises:
            MalformedPayloadError: If the body cannot be parsed
            ValidationError: If the response is incomplete or its checksum
                does not match
        """
        try:
            resp = Response.parse_and_validate(body, self.config.secret)
        except ValidationError as e:
            self.logger.warning(f"Received invalid response: {e.message}")
            raise
        except ThumberError as e:
            self.logger.warning(f"Failed to parse response body: {e.message}")
            raise

        if self.config.response_handler is not None:
            self.config.response_handler(resp)
        return resp

    def get_mime_types(self) -> List[str]:
        """
        Retrieve the MIME types the service supports.

        Returns:
            MIME type strings; empty if the service body is not a JSON list

        Raises:
            TransportError: If the HTTP exchange fails
        """
        headers = {"Content-Type": "application/json", "Content-Length": "0"}
        result = self.transport.send("GET", self._url(MIME_TYPES_PATH), headers)
        try:
            types = json.loads(result.body)
        except ValueError:
            self.logger.debug(f"MIME type body is not JSON (HTTP {result.status_code})")
            return []
        return types if isinstance(types, list) else []
