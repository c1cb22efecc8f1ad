"""
Thin wrapper around requests.Session that speaks to adventofcode.com.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import requests

from aoc_client.config import AocSettings
from aoc_client.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Page:
    """Status and decoded body of a successful response."""

    status: int
    text: str


class AocHttpClient:
    """Issues identified, optionally authenticated, requests and returns page text."""

    def __init__(
        self,
        settings: AocSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or AocSettings()
        self._session = session or requests.Session()

    @property
    def settings(self) -> AocSettings:
        return self._settings

    def get(self, path: str, *, session_token: str | None = None) -> Page:
        return self._request("GET", path, session_token=session_token)

    def post_form(
        self,
        path: str,
        data: Mapping[str, str],
        *,
        session_token: str,
    ) -> Page:
        return self._request("POST", path, session_token=session_token, data=data)

    def close(self) -> None:
        self._session.close()

    def _headers(self, session_token: str | None) -> dict[str, str]:
        headers = {"User-Agent": self._settings.user_agent}
        if session_token is not None:
            headers["Cookie"] = f"session={session_token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        session_token: str | None,
        data: Mapping[str, str] | None = None,
    ) -> Page:
        url = f"{self._settings.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s (authenticated=%s)", method, url, session_token is not None)

        # A dict body is form-encoded by requests, setting the content type.
        response = self._session.request(
            method,
            url,
            headers=self._headers(session_token),
            data=dict(data) if data is not None else None,
            timeout=self._settings.timeout,
        )

        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code)
        return Page(status=response.status_code, text=response.text)
