"""
Domain specific exception hierarchy for the aoc_client package.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aoc_client.duration import Duration


class AocClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(AocClientError):
    """Raised when required configuration or the session token is missing."""


class ApiResponseError(AocClientError):
    """Raised when Advent of Code answers with something we cannot use."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class TransportError(ApiResponseError):
    """Raised by the transport for any non-2xx HTTP status."""

    def __init__(self, status: int) -> None:
        super().__init__(str(status), code=status)
        self.status = status


class InvalidSessionError(ApiResponseError):
    """Raised when the session token is rejected or the status is unexpected."""

    def __init__(
        self,
        message: str = "Invalid or expired session token.",
        *,
        code: int | None = None,
    ) -> None:
        super().__init__(message, code=code)


class RateLimitExceeded(ApiResponseError):
    """Raised when the service asks us to wait before answering again."""

    def __init__(self, message: str, *, wait: "Duration") -> None:
        super().__init__(message)
        self.wait = wait


class SolveError(ApiResponseError):
    """Raised when the answer page has a shape we do not recognise."""


class InputAlreadyExistsError(AocClientError):
    """Raised when an input file is already present in the project directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists.")
        self.path = path
