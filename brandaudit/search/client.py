"""Search client with pluggable providers."""

import os
from collections.abc import Awaitable

from loguru import logger

from brandaudit.config.loader import DEFAULT_SEARCH_BASE_URLS
from brandaudit.config.schema import SearchConfig, SearchProviderName
from brandaudit.search.models import SearchResult
from brandaudit.search.serpapi import search_serpapi
from brandaudit.search.serper import search_serper
from brandaudit.utils.redaction import SecretRedactor


class SearchError(Exception):
    """Raised when search provider selection or execution fails."""


class SearchClient:
    """Provider dispatcher for organic search."""

    _ENV_KEYS: dict[SearchProviderName, str] = {
        "serpapi": "SERPAPI_KEY",
        "serper": "SERPER_API_KEY",
    }

    def __init__(
        self,
        config: SearchConfig | None = None,
        redactor: SecretRedactor | None = None,
    ):
        self.config = config or SearchConfig()
        self.redactor = redactor or SecretRedactor()

    async def search(self, query: str) -> list[SearchResult]:
        """Search using the configured provider."""
        provider = (self.config.provider or "serpapi").lower()
        if provider not in self._ENV_KEYS:
            raise SearchError(f"unknown search provider: {provider}")

        api_key = self._api_key(provider)
        if not api_key:
            env_key = self._ENV_KEYS[provider]
            raise SearchError(
                f"{provider} api key not configured "
                f"(set search.providers.{provider}.apiKey or {env_key})"
            )

        logger.debug("Searching {} for {!r}", provider, query)
        try:
            return await self._dispatch(provider, query, api_key)
        except Exception as e:
            message = self.redactor.redact(f"{provider} search failed: {e}")
            raise SearchError(message.replace(api_key, SecretRedactor.SECRET_PLACEHOLDER)) from e

    def _dispatch(
        self, provider: SearchProviderName, query: str, api_key: str
    ) -> Awaitable[list[SearchResult]]:
        providers = self.config.providers
        timeout = self.config.timeout
        base_url = getattr(providers, provider).base_url or DEFAULT_SEARCH_BASE_URLS[provider]
        if provider == "serper":
            return search_serper(
                query=query,
                api_key=api_key,
                base_url=base_url,
                num=providers.serper.num,
                timeout=timeout,
            )
        return search_serpapi(
            query=query,
            api_key=api_key,
            base_url=base_url,
            engine=providers.serpapi.engine,
            timeout=timeout,
        )

    def _api_key(self, provider: SearchProviderName) -> str:
        provider_cfg = getattr(self.config.providers, provider)
        return provider_cfg.api_key or os.environ.get(self._ENV_KEYS[provider], "")

