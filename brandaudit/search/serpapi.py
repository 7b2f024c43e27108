"""SerpAPI adapter."""

import httpx

from brandaudit.search.models import SearchResult

USER_AGENT = "BrandAuditTool/1.0"


async def search_serpapi(
    *,
    query: str,
    api_key: str,
    base_url: str,
    engine: str = "google",
    timeout: float = 20.0,
) -> list[SearchResult]:
    """Search with SerpAPI and return the organic listings."""
    async with httpx.AsyncClient() as client:
        response = await client.get(
            base_url,
            params={"q": query, "engine": engine, "api_key": api_key},
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
        )
        response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError("unexpected SerpAPI payload")
    if payload.get("error") and "organic_results" not in payload:
        raise ValueError(str(payload["error"]))

    results = payload.get("organic_results") or []
    return [
        SearchResult(
            title=item.get("title") or "",
            link=item.get("link") or "",
            snippet=item.get("snippet") or "",
        )
        for item in results
        if isinstance(item, dict)
    ]
