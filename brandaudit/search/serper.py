"""Serper Search API adapter."""

import httpx

from brandaudit.search.models import SearchResult


async def search_serper(
    *,
    query: str,
    api_key: str,
    base_url: str,
    num: int = 10,
    timeout: float = 20.0,
) -> list[SearchResult]:
    """Search with Serper API and normalize results."""
    async with httpx.AsyncClient() as client:
        response = await client.post(
            base_url,
            json={"q": query, "num": num},
            headers={
                "Content-Type": "application/json",
                "X-API-KEY": api_key,
            },
            timeout=timeout,
        )
        response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError("unexpected Serper payload")

    results = payload.get("organic") or []
    return [
        SearchResult(
            title=item.get("title") or "",
            link=item.get("link") or "",
            snippet=item.get("snippet") or "",
        )
        for item in results
        if isinstance(item, dict)
    ]
