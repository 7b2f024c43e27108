"""Resend transactional email adapter for delivering audit reports."""

import base64
import os
from html import escape

import httpx
from loguru import logger

from brandaudit.config.schema import NotifyConfig
from brandaudit.submission import Submission

DEFAULT_FROM = "Brand Audit <onboarding@resend.dev>"


class NotifyError(Exception):
    """Raised when the report email cannot be sent."""


def build_email(
    submission: Submission,
    document: str,
    *,
    sender: str,
    recipient: str,
) -> dict:
    """Build the Resend payload announcing a completed audit."""
    rows = "".join(
        f"<p><strong>{label}:</strong> {escape(value)}</p>"
        for label, value in (
            ("Name", submission.name),
            ("Email", submission.email),
            ("Company", submission.company),
            ("Phone", submission.phone),
            ("Website", submission.website),
        )
    )
    return {
        "from": sender,
        "to": [recipient],
        "subject": f"New Brand Audit Report: {submission.company}",
        "html": f"<h2>New Brand Audit Completed</h2>{rows}<p>The audit report is attached.</p>",
        "attachments": [
            {
                "filename": f"{submission.company}-brand-audit.html",
                "content": base64.b64encode(document.encode("utf-8")).decode("ascii"),
                "content_type": "text/html",
            }
        ],
    }


class ResendNotifier:
    """Email a rendered audit report to the sales inbox."""

    def __init__(self, config: NotifyConfig | None = None):
        self.config = config or NotifyConfig()

    @property
    def api_key(self) -> str:
        return self.config.api_key or os.environ.get("RESEND_API_KEY", "")

    @property
    def sender(self) -> str:
        return self.config.from_address or os.environ.get("NOTIFY_FROM", "") or DEFAULT_FROM

    @property
    def recipient(self) -> str:
        return self.config.to_address or os.environ.get("NOTIFY_TO", "")

    async def send(self, submission: Submission, document: str) -> bool:
        """
        Send the report email.

        Returns False when notification is not configured. Raises NotifyError
        when the API rejects the request.
        """
        if not self.api_key or not self.recipient:
            logger.warning("Report email skipped: RESEND_API_KEY or NOTIFY_TO not configured")
            return False

        payload = build_email(
            submission, document, sender=self.sender, recipient=self.recipient
        )
        logger.info(
            "Sending report for {} ({}), {} bytes",
            submission.company,
            submission.email,
            len(document.encode("utf-8")),
        )
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.config.base_url,
                    json=payload,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotifyError(f"resend request failed: {e}") from e

        data = response.json()
        message_id = data.get("id") if isinstance(data, dict) else None
        logger.info("Report email sent: {}", message_id)
        return True
