"""
Configuration management utilities for aoc_client.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from aoc_client.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://adventofcode.com"
DEFAULT_USER_AGENT = "github.com/aoc-client/aoc-client by maintainers@aoc-client.dev"
DEFAULT_TIMEOUT = 30.0

ENV_VAR_MAP = {
    "session_token": "AOC_SESSION",
}


@dataclass(slots=True)
class AocCredentials:
    """Holds the Advent of Code session cookie value."""

    session_token: str | None = None

    def is_empty(self) -> bool:
        return self.session_token in (None, "")

    def merge(self, other: "AocCredentials") -> "AocCredentials":
        """Merge credential sets, preferring non-null values from ``other``."""

        return AocCredentials(session_token=other.session_token or self.session_token)

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in asdict(self).items()
            if isinstance(value, str) and value
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "AocCredentials":
        token = data.get("session_token")
        return cls(session_token=token.strip() if isinstance(token, str) else token)


@dataclass(frozen=True, slots=True)
class AocSettings:
    """Transport settings shared by every request."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT


class ConfigManager:
    """Loads and persists the session token from the environment, .env or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/aoc_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> AocCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no session token is available.
        """

        for source in priority:
            if source == "env":
                credentials = self._load_from_mapping(self._env)
            elif source == "dotenv":
                credentials = self._load_from_mapping(self._dotenv())
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("Advent of Code session token is not configured.")

    def load_settings(self) -> AocSettings:
        """Build transport settings, letting the environment override defaults."""

        values = {**self._dotenv(), **self._env}
        timeout = values.get("AOC_TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(f"AOC_TIMEOUT must be a number, got '{timeout}'.") from exc

        return AocSettings(
            base_url=(values.get("AOC_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            user_agent=values.get("AOC_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=timeout_value,
        )

    def save_credentials(self, credentials: AocCredentials) -> None:
        """Persist credentials to disk, merging with existing values."""

        existing = self._load_from_file()
        merged = existing.merge(credentials) if existing else credentials

        self._credential_path.parent.mkdir(parents=True, exist_ok=True)
        with self._credential_path.open("w", encoding="utf-8") as fp:
            json.dump(merged.to_dict(), fp, indent=2, sort_keys=True)

        # The session cookie grants full account access
        os.chmod(self._credential_path, 0o600)

    def _dotenv(self) -> dict[str, str]:
        if not self._dotenv_path.exists():
            return {}
        return {
            key: value
            for key, value in dotenv_values(self._dotenv_path).items()
            if value is not None
        }

    @staticmethod
    def _load_from_mapping(source: Mapping[str, str]) -> AocCredentials | None:
        values: dict[str, str | None] = {
            field: source.get(env_name) for field, env_name in ENV_VAR_MAP.items()
        }
        credentials = AocCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_file(self) -> AocCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = AocCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
