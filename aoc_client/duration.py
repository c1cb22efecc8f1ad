"""Wait-time parsing for rate limit messages.

Advent of Code states how long to wait in prose. Depending on the page the
wait is either spelled out ("Please wait one minute") or given as shorthand
tokens ("You have 4m 12s left to wait"). ``parse_duration`` understands both,
preferring the spelled-out form whenever it is present.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

MS_SECOND = 1000
MS_MINUTE = 60 * MS_SECOND
MS_HOUR = 60 * MS_MINUTE
MS_DAY = 24 * MS_HOUR

NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

SPELLED_PATTERN = re.compile(
    r"\b(one|two|three|four|five|six|seven|eight|nine|ten) (second|minute|hour|day)"
)
SHORTHAND_PATTERN = re.compile(r"(\d+)\s*([smhd])")


@dataclass(frozen=True, slots=True)
class Duration:
    """Non-negative span of time split into calendar-ish units."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        if min(self.days, self.hours, self.minutes, self.seconds) < 0:
            raise ValueError("Duration units must be non-negative.")

    @property
    def milliseconds(self) -> int:
        return (
            self.days * MS_DAY
            + self.hours * MS_HOUR
            + self.minutes * MS_MINUTE
            + self.seconds * MS_SECOND
        )

    @classmethod
    def from_milliseconds(cls, ms: float) -> "Duration":
        """Normalise a millisecond count, dropping any sub-second remainder."""

        total = max(int(ms), 0)
        days, total = divmod(total, MS_DAY)
        hours, total = divmod(total, MS_HOUR)
        minutes, total = divmod(total, MS_MINUTE)
        return cls(days=days, hours=hours, minutes=minutes, seconds=total // MS_SECOND)

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.milliseconds)

    def render(self) -> str:
        """Human readable form with zero units omitted, e.g. ``"1h 5m"``."""

        parts = [
            f"{value}{unit}"
            for value, unit in (
                (self.days, "d"),
                (self.hours, "h"),
                (self.minutes, "m"),
                (self.seconds, "s"),
            )
            if value
        ]
        return " ".join(parts) or "0s"


def parse_duration(text: str) -> Duration | None:
    """
    Extract a wait time from free text.

    Returns:
        The parsed duration, or ``None`` when the text holds no recognisable
        time expression.
    """

    spelled = SPELLED_PATTERN.search(text)
    if spelled is not None:
        word, unit = spelled.groups()
        return _build({unit[0]: NUMBER_WORDS[word]})

    tokens = SHORTHAND_PATTERN.findall(text)
    if not tokens:
        return None

    totals: dict[str, int] = {}
    for value, unit in tokens:
        totals[unit] = totals.get(unit, 0) + int(value)
    return _build(totals)


def format_remaining(duration: Duration) -> str:
    """Countdown form used while cooling down: minutes and seconds always shown."""

    parts = []
    if duration.days:
        parts.append(f"{duration.days}d")
    if duration.days or duration.hours:
        parts.append(f"{duration.hours}h")
    parts.append(f"{duration.minutes}m")
    parts.append(f"{duration.seconds}s")
    return " ".join(parts)


def _build(units: dict[str, int]) -> Duration:
    # Shorthand totals may overflow a unit ("90s"); normalise through milliseconds.
    ms = (
        units.get("d", 0) * MS_DAY
        + units.get("h", 0) * MS_HOUR
        + units.get("m", 0) * MS_MINUTE
        + units.get("s", 0) * MS_SECOND
    )
    return Duration.from_milliseconds(ms)
