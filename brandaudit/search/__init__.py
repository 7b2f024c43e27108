"""Organic search providers."""

from brandaudit.search.client import SearchClient, SearchError
from brandaudit.search.models import SearchResult

__all__ = ["SearchClient", "SearchError", "SearchResult"]
