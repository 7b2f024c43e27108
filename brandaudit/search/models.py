"""Shared search result models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Single organic listing returned by a search provider."""

    title: str
    link: str
    snippet: str = ""
