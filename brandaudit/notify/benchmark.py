"""Benchmark Email adapter for newsletter sign-ups."""

import os

import httpx
from loguru import logger

from brandaudit.config.schema import SubscribeConfig


class SubscribeError(Exception):
    """Raised when the contact cannot be added to the mailing list."""


def split_name(name: str) -> tuple[str, str]:
    """Split a full name into first name and the remainder."""
    first, _, last = (name or "").strip().partition(" ")
    return first, last.strip()


class BenchmarkSubscriber:
    """Add audit submitters to a Benchmark Email contact list."""

    def __init__(self, config: SubscribeConfig | None = None):
        self.config = config or SubscribeConfig()

    @property
    def auth_token(self) -> str:
        return self.config.auth_token or os.environ.get("BENCHMARK_AUTH_TOKEN", "")

    @property
    def list_id(self) -> str:
        return self.config.list_id or os.environ.get("BENCHMARK_LIST_ID", "")

    async def subscribe(self, name: str, email: str) -> bool:
        """
        Add a contact to the list.

        Returns False when the list is not configured. Raises SubscribeError
        when the API rejects the request.
        """
        if not self.auth_token or not self.list_id:
            logger.warning("Subscription skipped: Benchmark auth token or list id not configured")
            return False

        first_name, last_name = split_name(name)
        url = f"{self.config.base_url.rstrip('/')}/Contact/{self.list_id}/ContactDetails"
        body = {
            "Data": {
                "Email": email,
                "FirstName": first_name,
                "LastName": last_name,
                "EmailPerm": "1",
            }
        }
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=body,
                    headers={
                        "AuthToken": self.auth_token,
                        "Content-Type": "application/json",
                    },
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise SubscribeError(f"benchmark request failed: {e}") from e

        logger.debug("Benchmark response: {} {}", response.status_code, response.text[:200])
        return True
