"""Integration tests with HTTP mocking using responses library."""

from __future__ import annotations

from unittest.mock import Mock
from urllib.parse import parse_qs

import pytest
import requests
import responses

from aoc_client.clients.http_client import AocHttpClient
from aoc_client.config import AocSettings
from aoc_client.exceptions import InvalidSessionError, RateLimitExceeded, TransportError
from aoc_client.factory import AocClientFactory, AocServices
from aoc_client.models import SubmissionRequest
from aoc_client.rate_limit import BackoffScheduler
from .fixtures import (
    CALENDAR_PAGE,
    EVENTS_PAGE,
    RIGHT_ANSWER_PAGE,
    TOO_RECENT_SPELLED_PAGE,
    FakeClock,
)

BASE_URL = "https://aoc.test"
USER_AGENT = "aoc-client tests by tests@example.com"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def services(clock: FakeClock) -> AocServices:
    settings = AocSettings(base_url=BASE_URL, user_agent=USER_AGENT, timeout=5)
    return AocClientFactory.create_from_settings(
        settings, scheduler=BackoffScheduler(clock=clock)
    )


@responses.activate
def test_submission_sends_cookie_user_agent_and_form(services: AocServices) -> None:
    responses.post(f"{BASE_URL}/2023/day/5/answer", body=RIGHT_ANSWER_PAGE, status=200)

    outcome = services.submissions.submit(
        SubmissionRequest(year=2023, day=5, part=1, answer="35"), "abc123"
    )

    assert outcome.accepted
    request = responses.calls[0].request
    assert request.headers["Cookie"] == "session=abc123"
    assert request.headers["User-Agent"] == USER_AGENT
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(request.body) == {"level": ["1"], "answer": ["35"]}


@responses.activate
def test_answer_is_url_encoded(services: AocServices) -> None:
    responses.post(f"{BASE_URL}/2023/day/5/answer", body=RIGHT_ANSWER_PAGE, status=200)

    services.submissions.submit(
        SubmissionRequest(year=2023, day=5, part=2, answer="a&b=c"), "abc123"
    )

    assert parse_qs(responses.calls[0].request.body) == {"level": ["2"], "answer": ["a&b=c"]}


@responses.activate
def test_rate_limited_submission_then_local_waiting(
    services: AocServices, clock: FakeClock
) -> None:
    responses.post(f"{BASE_URL}/2023/day/5/answer", body=TOO_RECENT_SPELLED_PAGE, status=200)
    request = SubmissionRequest(year=2023, day=5, part=1, answer="35")

    with pytest.raises(RateLimitExceeded) as exc:
        services.submissions.submit(request, "abc123")
    assert str(exc.value) == "Next request possible in: 1m"

    seconds = []
    for _ in range(3):
        clock.advance(5)
        outcome = services.submissions.submit(request, "abc123")
        assert outcome.status == "waiting"
        assert outcome.message.startswith("You have to wait: 0m ")
        seconds.append(int(outcome.message.rsplit(" ", 1)[1].rstrip("s")))

    assert seconds == [55, 50, 45]
    assert len(responses.calls) == 1


@responses.activate
def test_server_error_on_submission_is_invalid_session(services: AocServices) -> None:
    responses.post(f"{BASE_URL}/2023/day/5/answer", body="oops", status=500)

    with pytest.raises(InvalidSessionError) as exc:
        services.submissions.submit(
            SubmissionRequest(year=2023, day=5, part=1, answer="35"), "expired"
        )

    assert exc.value.code == 500


@responses.activate
def test_input_download(services: AocServices) -> None:
    responses.get(f"{BASE_URL}/2023/day/5/input", body="seeds: 79 14 55 13\n", status=200)

    text = services.inputs.fetch_input(2023, 5, "abc123")

    assert text == "seeds: 79 14 55 13"
    assert responses.calls[0].request.headers["Cookie"] == "session=abc123"


@responses.activate
def test_input_bad_session(services: AocServices) -> None:
    responses.get(f"{BASE_URL}/2023/day/5/input", body="Please log in", status=400)

    with pytest.raises(InvalidSessionError):
        services.inputs.fetch_input(2023, 5, "nope")


@responses.activate
def test_years_request_carries_no_cookie(services: AocServices) -> None:
    responses.get(f"{BASE_URL}/events", body=EVENTS_PAGE, status=200)

    assert services.progress.get_years() == [2023, 2022, 2021]
    request = responses.calls[0].request
    assert "Cookie" not in request.headers
    assert request.headers["User-Agent"] == USER_AGENT


@responses.activate
def test_years_request_failure_propagates_transport_error(services: AocServices) -> None:
    responses.get(f"{BASE_URL}/events", status=502)

    with pytest.raises(TransportError) as exc:
        services.progress.get_years()

    assert exc.value.status == 502


@responses.activate
def test_calendar_stars(services: AocServices) -> None:
    responses.get(f"{BASE_URL}/2023", body=CALENDAR_PAGE, status=200)

    assert services.progress.get_stars_for_year(2023, "abc123") == {1: 2, 2: 1, 3: 0}


def test_close_releases_session() -> None:
    session = Mock(spec=requests.Session)
    client = AocHttpClient(AocSettings(base_url=BASE_URL), session=session)

    client.close()

    session.close.assert_called_once_with()
