"""Canned Advent of Code pages used across the test suite."""

from __future__ import annotations

RIGHT_ANSWER_PAGE = (
    "<html><body><main><article><p>That's the right answer!  You are one gold star"
    " closer to saving Christmas."
    ' <a href="/2023/day/5#part2">[Continue to Part Two]</a></p></article></main>'
    "</body></html>"
)

WRONG_ANSWER_TEXT = (
    "That's not the right answer; your answer is too low.  If you're stuck, make"
    " sure you're using the full input data.  Please wait one minute before trying"
    " again."
)

WRONG_ANSWER_PAGE = (
    f"<html><body><main><article><p>{WRONG_ANSWER_TEXT}"
    ' <a href="/2023/day/5">[Return to Day 5]</a></p></article></main></body></html>'
)

TOO_RECENT_SHORTHAND_PAGE = (
    "<html><body><main><article><p>You gave an answer too recently; you have to wait"
    " after submitting an answer before trying again.  You have 4m 38s left to wait."
    ' <a href="/2023/day/5">[Return to Day 5]</a></p></article></main></body></html>'
)

TOO_RECENT_SPELLED_PAGE = (
    "<html><body><main><article><p>You gave an answer too recently; please wait one"
    " minute before trying again."
    ' <a href="/2023/day/5">[Return to Day 5]</a></p></article></main></body></html>'
)

TOO_RECENT_NO_WAIT_PAGE = (
    "<html><body><main><article><p>You gave an answer too recently; please be"
    " patient.</p></article></main></body></html>"
)

ALREADY_SOLVED_PAGE = (
    "<html><body><main><article><p>You don't seem to be solving the right level."
    "  Did you already complete it?</p></article></main></body></html>"
)

NO_MAIN_PAGE = "<html><body><p>Maintenance in progress</p></body></html>"

EVENTS_PAGE = (
    "<html><body><main>"
    '<div class="eventlist-event"><a href="/2023">[2023]</a>'
    ' <span class="star-count">34*</span></div>'
    '<div class="eventlist-event"><a href="/2022">[2022]</a>'
    ' <span class="star-count">50*</span></div>'
    '<div class="eventlist-event"><a href="/2021">[2021]</a></div>'
    "</main></body></html>"
)

CALENDAR_PAGE = (
    '<html><body><main><pre class="calendar">'
    '<a aria-label="Day 1, two stars" href="/2023/day/1"'
    ' class="calendar-day1 calendar-verycomplete">day 1</a>'
    '<a aria-label="Day 2, one star" href="/2023/day/2"'
    ' class="calendar-day2 calendar-complete">day 2</a>'
    '<a aria-label="Day 3" href="/2023/day/3" class="calendar-day3">day 3</a>'
    "</pre></main></body></html>"
)


class FakeClock:
    """Controllable monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
