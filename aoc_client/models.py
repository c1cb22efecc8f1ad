"""
Pydantic models for Advent of Code requests and results used by aoc_client.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OutcomeStatus = Literal["success", "wrong", "waiting"]


class SubmissionRequest(BaseModel):
    """One answer attempt for a puzzle part."""

    year: int = Field(..., ge=2015)
    day: int = Field(..., ge=1, le=25)
    part: Literal[1, 2]
    answer: str

    model_config = ConfigDict(frozen=True)

    @field_validator("answer", mode="before")
    @classmethod
    def coerce_answer(cls, value: object) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        raise ValueError("answer must be a string or an integer.")


class SubmissionOutcome(BaseModel):
    """Result of a submission that did not fail."""

    status: OutcomeStatus
    message: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def success(cls) -> "SubmissionOutcome":
        return cls(status="success")

    @classmethod
    def wrong(cls, message: str) -> "SubmissionOutcome":
        return cls(status="wrong", message=message)

    @classmethod
    def waiting(cls, message: str) -> "SubmissionOutcome":
        return cls(status="waiting", message=message)

    @property
    def accepted(self) -> bool:
        return self.status == "success"


class YearStars(BaseModel):
    year: int
    stars: int = Field(0, ge=0)


class DayStars(BaseModel):
    day: int
    stars: int = Field(0, ge=0, le=2)
