"""Client for Advent of Code answers, inputs and star progress."""

from __future__ import annotations

__all__ = [
    "AocClientFactory",
    "BackoffScheduler",
    "ConfigManager",
    "Duration",
    "SubmissionOutcome",
    "SubmissionRequest",
    "parse_duration",
]

from .config import ConfigManager
from .duration import Duration, parse_duration
from .factory import AocClientFactory
from .models import SubmissionOutcome, SubmissionRequest
from .rate_limit import BackoffScheduler
