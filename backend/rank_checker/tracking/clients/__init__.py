"""SERP API clients: HasData."""

from .hasdata import build_search_url, fetch_serp

__all__ = ["build_search_url", "fetch_serp"]
