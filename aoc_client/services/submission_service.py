"""
Answer submission workflow guarded by the shared cooldown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol

from aoc_client.classifier import classify_failure, classify_submission
from aoc_client.clients.http_client import Page
from aoc_client.exceptions import TransportError
from aoc_client.models import SubmissionOutcome, SubmissionRequest
from aoc_client.rate_limit import BackoffScheduler, default_scheduler


class SubmissionClient(Protocol):
    """Protocol subset consumed by the service."""

    def post_form(self, path: str, data: Mapping[str, str], *, session_token: str) -> Page:
        ...


@dataclass(slots=True)
class SubmissionService:
    """Submits answers and turns the resulting page into an outcome."""

    client: SubmissionClient
    scheduler: BackoffScheduler = field(default_factory=default_scheduler)

    def submit(self, request: SubmissionRequest, session_token: str) -> SubmissionOutcome:
        """
        Submit one answer.

        Args:
            request: Puzzle coordinates and answer text
            session_token: Value of the user's ``session`` cookie

        Returns:
            Success, wrong answer, or a waiting outcome when a cooldown is active

        Raises:
            InvalidSessionError: If the service rejects the session
            RateLimitExceeded: If the service asks us to wait; the cooldown is armed
            SolveError: If the answer page is not recognised
        """

        def attempt() -> SubmissionOutcome:
            try:
                page = self.client.post_form(
                    f"{request.year}/day/{request.day}/answer",
                    {"level": str(request.part), "answer": request.answer},
                    session_token=session_token,
                )
            except TransportError as exc:
                raise classify_failure(exc) from exc
            return classify_submission(page.status, page.text)

        return self.scheduler.run(attempt)
