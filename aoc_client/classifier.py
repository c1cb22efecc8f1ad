"""
Interpretation of Advent of Code HTML pages.

The service has no machine-readable API, so outcomes are recognised from the
wording of its pages. All of that wording lives in this module.
"""

from __future__ import annotations

import logging
import re

from selectolax.lexbor import LexborHTMLParser

from aoc_client.duration import parse_duration
from aoc_client.exceptions import (
    InvalidSessionError,
    RateLimitExceeded,
    SolveError,
    TransportError,
)
from aoc_client.models import DayStars, SubmissionOutcome, YearStars

logger = logging.getLogger(__name__)

RIGHT_ANSWER = "That's the right answer"
WRONG_ANSWER = "That's not the right answer"
TOO_RECENT = "You gave an answer too recently"
MISSING_MAIN = "Can't find the main element"

BRACKETED_RUN = re.compile(r"\[.*\]")
EVENT_PATTERN = re.compile(r"\[(\d+)\]\s*(?:(\d+)\*)?")


def ensure_ok(status: int) -> None:
    """Treat every status besides 200 as a rejected session."""

    if status != 200:
        raise InvalidSessionError(code=status)


def classify_failure(exc: TransportError) -> InvalidSessionError:
    """Map a transport failure on an authenticated endpoint to a session error."""

    return InvalidSessionError(code=exc.status)


def main_text(body: str) -> str:
    """Text of the ``<main>`` element without its leading bracketed counter."""

    main = LexborHTMLParser(body).css_first("main")
    if main is None:
        return MISSING_MAIN
    return BRACKETED_RUN.sub("", main.text(), count=1).strip()


def classify_submission(status: int, body: str) -> SubmissionOutcome:
    """
    Classify the page returned after posting an answer.

    Raises:
        InvalidSessionError: For any status other than 200.
        RateLimitExceeded: When the page states a parseable wait time.
        SolveError: When the page matches none of the known answers.
    """

    ensure_ok(status)
    info = main_text(body)

    if RIGHT_ANSWER in info:
        return SubmissionOutcome.success()
    if WRONG_ANSWER in info:
        return SubmissionOutcome.wrong(info)
    if TOO_RECENT in info:
        wait = parse_duration(info)
        if wait is not None:
            raise RateLimitExceeded(
                f"Next request possible in: {wait.render()}", wait=wait
            )

    logger.warning("Unrecognised answer page: %s", info)
    raise SolveError(info)


def parse_years(body: str) -> list[int]:
    """Years listed on the events page, in page order."""

    years = []
    for node in LexborHTMLParser(body).css(".eventlist-event a"):
        text = node.text().strip()
        years.append(int(text[1:-1]))
    return years


def parse_year_stars(body: str) -> list[YearStars]:
    """Per-year star totals from the authenticated events page."""

    results = []
    for node in LexborHTMLParser(body).css(".eventlist-event"):
        match = EVENT_PATTERN.search(node.text())
        if match is None:
            continue
        year, stars = match.groups()
        results.append(YearStars(year=int(year), stars=int(stars or 0)))
    return results


def parse_calendar(body: str) -> list[DayStars]:
    """Per-day star levels from a year's calendar page."""

    results = []
    for node in LexborHTMLParser(body).css(".calendar a"):
        href = node.attributes.get("href") or ""
        segment = href.rstrip("/").split("/")[-1]
        day = int(segment) if segment.isdigit() else 0
        classes = (node.attributes.get("class") or "").split()
        if "calendar-verycomplete" in classes:
            stars = 2
        elif "calendar-complete" in classes:
            stars = 1
        else:
            stars = 0
        results.append(DayStars(day=day, stars=stars))
    return results
