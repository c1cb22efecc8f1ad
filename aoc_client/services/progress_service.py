"""
Star progress lookups for events and calendars.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from aoc_client.classifier import (
    classify_failure,
    ensure_ok,
    parse_calendar,
    parse_year_stars,
    parse_years,
)
from aoc_client.clients.http_client import Page
from aoc_client.exceptions import TransportError

MAX_STARS_PER_YEAR = 50


class ProgressClient(Protocol):
    """Protocol subset consumed by the service."""

    def get(self, path: str, *, session_token: str | None = None) -> Page:
        ...


@dataclass(slots=True)
class ProgressService:
    """Reads years, star totals and per-day completion."""

    client: ProgressClient

    def get_years(self) -> list[int]:
        """Every year the event has run; no session required."""

        page = self.client.get("events")
        return parse_years(page.text)

    def get_stars(self, session_token: str) -> dict[int, int]:
        page = self._authenticated("events", session_token)
        return {entry.year: entry.stars for entry in parse_year_stars(page.text)}

    def get_stars_for_year(self, year: int, session_token: str) -> dict[int, int]:
        page = self._authenticated(str(year), session_token)
        return {entry.day: entry.stars for entry in parse_calendar(page.text)}

    def incomplete_years(self, session_token: str) -> list[int]:
        """Years in which the user has not yet collected every star."""

        stars = self.get_stars(session_token)
        return [year for year, count in stars.items() if count < MAX_STARS_PER_YEAR]

    def _authenticated(self, path: str, session_token: str) -> Page:
        try:
            page = self.client.get(path, session_token=session_token)
        except TransportError as exc:
            raise classify_failure(exc) from exc
        ensure_ok(page.status)
        return page
