"""
Thumbnail job request.

A Request names the submitting account, where the service should deliver the
response, and the job itself: the source document and the output wanted.
"""

from __future__ import annotations
import logging
import time
from typing import List, Optional

from pydantic import Field

from ..runtime.errors import PreconditionViolation
from .transaction import Transaction

logger = logging.getLogger(__name__)


class Request(Transaction):
    """
    Request for the service to generate a thumbnail.

    ``uid`` and ``callback`` are filled from the client configuration when
    left empty. Either ``url`` or ``data`` identifies the source document.
    """

    uid: Optional[str] = Field(
        default=None,
        description="Account identifier of the submitter"
    )
    callback: Optional[str] = Field(
        default=None,
        description="URL the service POSTs the response to"
    )
    url: Optional[str] = Field(
        default=None,
        description="URL of the source document"
    )
    mime_type: Optional[str] = Field(
        default=None,
        alias="mimeType",
        description="MIME type of the source document"
    )
    geometry: Optional[str] = Field(
        default=None,
        description="Output geometry, e.g. '150x150'"
    )
    pg: Optional[int] = Field(
        default=None,
        strict=True,
        description="Page of the source document to render (1-based)"
    )

    def validation_issues(self) -> List[str]:
        issues = super().validation_issues()
        if not self.uid:
            issues.append("uid is missing")
        if not self.callback:
            issues.append("callback is missing")
        return issues

    def prepare_for_send(self, config) -> Request:
        """
        Stamp this request so it is ready to send.

        Fills ``uid`` and ``callback`` from ``config`` when empty, sets the
        timestamp to now, generates a nonce when empty and computes the
        checksum.

        Args:
            config: A ClientConfig supplying uid, callback and secret

        Returns:
            self

        Raises:
            PreconditionViolation: If the stamped request is still invalid
        """
        if not self.uid:
            self.uid = config.uid
        if not self.callback and config.callback:
            self.callback = config.callback
        self.timestamp = int(time.time())
        if not self.nonce:
            self.set_nonce()
        self.sign(config.secret)

        if not self.is_valid(config.secret):
            raise PreconditionViolation(
                "Invalid request provided",
                details={"issues": self.validation_issues()},
            )

        logger.debug(f"Prepared request nonce={self.nonce} uid={self.uid}")
        return self
