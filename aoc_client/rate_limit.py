"""
Cooldown tracking for answer submissions.

Advent of Code limits answers per user, so every submission made from this
process shares a single cooldown clock. The state lives in ``ThrottleState``
and is only touched through ``BackoffScheduler``, which takes a lock around
the check, the attempt and the update.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from aoc_client.duration import Duration, format_remaining
from aoc_client.exceptions import RateLimitExceeded
from aoc_client.models import SubmissionOutcome

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Monotonic time source in seconds."""

    def __call__(self) -> float:
        raise NotImplementedError


@dataclass(slots=True)
class ThrottleState:
    """Mutable cooldown bookkeeping owned by a scheduler."""

    can_submit: bool = True
    cooldown_started_at: float = 0.0
    cooldown_duration: Duration = field(default_factory=Duration)

    def deadline(self) -> float:
        return self.cooldown_started_at + self.cooldown_duration.milliseconds / 1000


class BackoffScheduler:
    """Gate that suppresses submissions while a server-stated wait is active."""

    def __init__(
        self,
        state: ThrottleState | None = None,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self._state = state or ThrottleState()
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def state(self) -> ThrottleState:
        return self._state

    def is_cooling(self) -> bool:
        return self.remaining() is not None

    def remaining(self) -> Duration | None:
        """
        Time left in the active cooldown.

        Returns ``None`` when submissions are allowed. Reopens the gate when the
        deadline has passed.
        """

        with self._lock:
            state = self._state
            if state.can_submit:
                return None

            elapsed_ms = (self._clock() - state.cooldown_started_at) * 1000
            remaining_ms = state.cooldown_duration.milliseconds - elapsed_ms
            if remaining_ms <= 0:
                logger.info("Cooldown elapsed, submissions allowed again")
                state.can_submit = True
                return None
            return Duration.from_milliseconds(remaining_ms)

    def arm(self, duration: Duration) -> None:
        with self._lock:
            self._state.can_submit = False
            self._state.cooldown_started_at = self._clock()
            self._state.cooldown_duration = duration
        logger.info("Cooldown armed for %s", duration.render())

    def reset(self) -> None:
        with self._lock:
            self._state.can_submit = True
            self._state.cooldown_started_at = 0.0
            self._state.cooldown_duration = Duration()

    def run(self, attempt: Callable[[], SubmissionOutcome]) -> SubmissionOutcome:
        """
        Execute ``attempt`` unless a cooldown is active.

        Args:
            attempt: Callable performing the network submission.

        Returns:
            The attempt's outcome, or a waiting outcome when cooling down.
            Remaining time is floored to whole seconds, so the final second of
            a cooldown still blocks while reporting "0m 0s".

        Raises:
            RateLimitExceeded: After arming a new cooldown from the error's wait.
        """

        with self._lock:
            remaining = self.remaining()
            if remaining is not None:
                return SubmissionOutcome.waiting(
                    f"You have to wait: {format_remaining(remaining)}"
                )

            try:
                return attempt()
            except RateLimitExceeded as exc:
                self.arm(exc.wait)
                raise


_default_scheduler: BackoffScheduler | None = None
_default_lock = threading.Lock()


def default_scheduler() -> BackoffScheduler:
    """Process-wide scheduler shared by clients that do not inject their own."""

    global _default_scheduler
    with _default_lock:
        if _default_scheduler is None:
            _default_scheduler = BackoffScheduler()
        return _default_scheduler
