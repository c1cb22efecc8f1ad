"""
Factory for wiring the HTTP client and services from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

import requests

from aoc_client.clients.http_client import AocHttpClient
from aoc_client.config import AocSettings, ConfigManager
from aoc_client.rate_limit import BackoffScheduler, default_scheduler
from aoc_client.services.input_service import InputService
from aoc_client.services.progress_service import ProgressService
from aoc_client.services.submission_service import SubmissionService


@dataclass(slots=True)
class AocServices:
    """Services sharing one HTTP client."""

    client: AocHttpClient
    submissions: SubmissionService
    progress: ProgressService
    inputs: InputService


class AocClientFactory:
    """Factory for creating properly initialized Advent of Code clients."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        scheduler: BackoffScheduler | None = None,
    ) -> AocServices:
        """
        Create services using settings from ``config_manager``.

        Raises:
            ConfigurationError: If a setting cannot be parsed
        """
        return AocClientFactory.create_from_settings(
            config_manager.load_settings(), scheduler=scheduler
        )

    @staticmethod
    def create_from_settings(
        settings: AocSettings,
        *,
        scheduler: BackoffScheduler | None = None,
        session: requests.Session | None = None,
    ) -> AocServices:
        """
        Create services directly from settings.

        Args:
            settings: Base URL, user agent and timeout
            scheduler: Cooldown gate; the process-wide one when omitted
            session: Pre-configured requests session, e.g. with retries mounted
        """
        client = AocHttpClient(settings, session=session)
        return AocServices(
            client=client,
            submissions=SubmissionService(client, scheduler or default_scheduler()),
            progress=ProgressService(client),
            inputs=InputService(client),
        )
