"""
Puzzle input download.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from aoc_client.classifier import classify_failure, ensure_ok
from aoc_client.clients.http_client import Page
from aoc_client.exceptions import InputAlreadyExistsError, TransportError

INPUT_FILENAME = "input.txt"


class InputClient(Protocol):
    """Protocol subset consumed by the service."""

    def get(self, path: str, *, session_token: str | None = None) -> Page:
        ...


@dataclass(slots=True)
class InputService:
    """Fetches puzzle inputs and stores them next to a solution."""

    client: InputClient

    def fetch_input(self, year: int, day: int, session_token: str) -> str:
        try:
            page = self.client.get(f"{year}/day/{day}/input", session_token=session_token)
        except TransportError as exc:
            raise classify_failure(exc) from exc
        ensure_ok(page.status)

        text = page.text
        return text[:-1] if text.endswith("\n") else text

    def save_input(self, year: int, day: int, project_dir: Path, session_token: str) -> Path:
        """
        Download the input into ``project_dir/input.txt``.

        Raises:
            FileNotFoundError: If the project directory does not exist
            InputAlreadyExistsError: If an input file is already present
        """

        project_dir = Path(project_dir)
        if not project_dir.is_dir():
            raise FileNotFoundError(f"Project directory not found: {project_dir}")

        input_path = project_dir / INPUT_FILENAME
        if input_path.exists():
            raise InputAlreadyExistsError(input_path)

        text = self.fetch_input(year, day, session_token)
        # Exclusive create: a file that appeared during the download is kept.
        try:
            with input_path.open("x", encoding="utf-8") as fp:
                fp.write(text)
        except FileExistsError as exc:
            raise InputAlreadyExistsError(input_path) from exc
        return input_path
