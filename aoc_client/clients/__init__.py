"""HTTP adapters for aoc_client."""

from __future__ import annotations

__all__ = ["AocHttpClient", "Page"]

from .http_client import AocHttpClient, Page
