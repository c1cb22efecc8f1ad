"""
Command line interface for aoc_client.

Usage:
    # Submit part 1 of 2023 day 5
    aoc-client submit 2023 5 1 35

    # Download the input into ./day05/input.txt
    aoc-client input 2023 5 day05

    # Star totals per year, or per day for one year
    aoc-client stars
    aoc-client stars --year 2023

    # Years the event has run, optionally only the unfinished ones
    aoc-client years
    aoc-client years --incomplete

Requirements:
    Set AOC_SESSION in the environment or a .env file to the value of the
    ``session`` cookie from a logged-in browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from aoc_client.config import ConfigManager
from aoc_client.exceptions import (
    AocClientError,
    ConfigurationError,
    InputAlreadyExistsError,
    InvalidSessionError,
    RateLimitExceeded,
    SolveError,
)
from aoc_client.factory import AocClientFactory, AocServices
from aoc_client.models import SubmissionRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc-client",
        description="Submit answers and fetch inputs for Advent of Code",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to .env file (default: ./.env)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log HTTP requests and cooldown changes",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit = subparsers.add_parser("submit", help="Submit an answer")
    submit.add_argument("year", type=int)
    submit.add_argument("day", type=int)
    submit.add_argument("part", type=int, choices=(1, 2))
    submit.add_argument("answer")

    fetch = subparsers.add_parser("input", help="Download a puzzle input")
    fetch.add_argument("year", type=int)
    fetch.add_argument("day", type=int)
    fetch.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Project directory receiving input.txt (default: current directory)",
    )

    stars = subparsers.add_parser("stars", help="Show collected stars")
    stars.add_argument("--year", type=int, help="Show per-day stars for one year")

    years = subparsers.add_parser("years", help="List event years")
    years.add_argument(
        "--incomplete",
        action="store_true",
        help="Only years with fewer than 50 stars (requires a session)",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, services: AocServices | None = None) -> int:
    """Main entry point for the command line tool."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager(dotenv_path=args.dotenv) if args.dotenv else ConfigManager()

    owned_client = None
    try:
        if services is None:
            services = AocClientFactory.create_from_config(config)
            owned_client = services.client

        if args.command == "years" and not args.incomplete:
            for year in services.progress.get_years():
                print(year)
            return 0

        token = config.load_credentials().session_token
        if not token:
            raise ConfigurationError("Advent of Code session token is not configured.")

        if args.command == "submit":
            return _submit(services, args, token)
        if args.command == "input":
            path = services.inputs.save_input(args.year, args.day, args.directory, token)
            print(f"✅ Input saved to {path}")
            return 0
        if args.command == "stars":
            return _stars(services, args.year, token)
        for year in services.progress.incomplete_years(token):
            print(year)
        return 0

    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}")
        print("\nSet AOC_SESSION in the environment or a .env file.")
        return 1

    except InvalidSessionError:
        print("❌ Session rejected by Advent of Code")
        print("Your session token may have expired; copy a fresh one from the browser.")
        return 1

    except RateLimitExceeded as e:
        print(f"⏳ Rate limited. {e}")
        return 1

    except SolveError as e:
        print(f"❌ Unexpected answer page:\n{e}")
        return 1

    except InputAlreadyExistsError as e:
        print(f"❌ {e}")
        return 1

    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    except ValidationError as e:
        print(f"❌ Invalid submission: {e}")
        return 1

    except AocClientError as e:
        print(f"❌ Advent of Code error: {e}")
        return 1

    finally:
        if owned_client is not None:
            owned_client.close()


def _submit(services: AocServices, args: argparse.Namespace, token: str) -> int:
    request = SubmissionRequest(
        year=args.year,
        day=args.day,
        part=args.part,
        answer=args.answer,
    )
    outcome = services.submissions.submit(request, token)

    if outcome.status == "success":
        print("✅ That's the right answer!")
    elif outcome.status == "wrong":
        print(f"❌ {outcome.message}")
    else:
        print(f"⏳ {outcome.message}")
    return 0


def _stars(services: AocServices, year: int | None, token: str) -> int:
    if year is None:
        for event_year, count in sorted(services.progress.get_stars(token).items()):
            print(f"{event_year}: {count}*")
        return 0

    for day, count in sorted(services.progress.get_stars_for_year(year, token).items()):
        print(f"Day {day:2d}: {'*' * count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
