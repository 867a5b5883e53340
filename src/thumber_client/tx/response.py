"""
Thumbnail job response.

Delivered asynchronously to the request's callback URL. A successful response
carries the thumbnail as its payload; a failed one carries an error message.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Union

from pydantic import Field

from .transaction import Secret, Transaction

logger = logging.getLogger(__name__)


class Response(Transaction):
    """Outcome of a Request, signed by the service."""

    success: Optional[bool] = Field(
        default=None,
        strict=True,
        description="Whether the related request was successful"
    )
    error: Optional[str] = Field(
        default=None,
        description="What went wrong, when success is false"
    )

    def validation_issues(self) -> List[str]:
        """
        Envelope issues plus the success/error pairing.

        The pairing affects ``is_valid`` only; ``is_structurally_valid`` checks
        the envelope fields alone.
        """
        issues = super().validation_issues()
        if self.success is None:
            issues.append("success is missing")
        elif self.success:
            if not self.encoded_data:
                issues.append("successful response has no data")
        elif self.error is None:
            issues.append("failed response has no error")
        return issues

    @classmethod
    def parse_and_validate(cls, raw: Union[str, bytes], secret: Secret) -> Response:
        """
        Parse an inbound webhook body and verify it.

        Args:
            raw: The POST body
            secret: The user secret

        Returns:
            The validated Response

        Raises:
            MalformedPayloadError: If the body cannot be parsed
            InvalidTransactionError: If required fields are missing or
                success/error disagree
            InvalidSignatureError: If the checksum does not match
        """
        resp = cls.from_json(raw)
        resp.ensure_valid(secret, details={"payload": raw})
        logger.debug(f"Validated response nonce={resp.nonce} success={resp.success}")
        return resp
