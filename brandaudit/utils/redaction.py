"""Utilities for redacting credentials from error messages and logs."""

from __future__ import annotations

import re
from typing import Iterable


class SecretRedactor:
    """Redact API keys and tokens from text before it is logged or shown."""

    SECRET_PLACEHOLDER = "[REDACTED_SECRET]"

    _KV_SECRET_RE = re.compile(
        r'(?i)(["\']?(?:api[_-]?key|x-api-key|auth[_-]?token|token|secret|password|authorization)["\']?\s*[:=]\s*["\']?)([^"\'\s,&}\][][^"\'\s,&}\]]*)'
    )
    _BEARER_RE = re.compile(r"(?i)\bBearer\s+[A-Za-z0-9._~+/=\-]{8,}\b")
    _RESEND_KEY_RE = re.compile(r"\bre_[A-Za-z0-9_]{8,}\b")

    def __init__(self, enabled: bool = True, extra_secrets: Iterable[str] | None = None):
        self.enabled = enabled
        self._literal_secrets: set[str] = set()
        for raw in extra_secrets or ():
            value = str(raw or "").strip()
            if len(value) >= 6:
                self._literal_secrets.add(value)

    def redact(self, text: str) -> str:
        """Redact sensitive values from text."""
        if not self.enabled or not text:
            return text

        sanitized = self._KV_SECRET_RE.sub(rf"\1{self.SECRET_PLACEHOLDER}", text)
        for value in sorted(self._literal_secrets, key=len, reverse=True):
            sanitized = sanitized.replace(value, self.SECRET_PLACEHOLDER)

        sanitized = self._BEARER_RE.sub(f"Bearer {self.SECRET_PLACEHOLDER}", sanitized)
        sanitized = self._RESEND_KEY_RE.sub(self.SECRET_PLACEHOLDER, sanitized)
        return sanitized
