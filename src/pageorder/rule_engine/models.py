"""Pydantic models and enums for the rule engine layer."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ClassificationMode(StrEnum):
    STRICT = "strict"  # every pairwise order must be sanctioned by a rule
    LENIENT = "lenient"  # only an opposing rule is a violation


class UpdateStatus(StrEnum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class PageRule(BaseModel):
    """Page ``before`` must appear earlier than page ``after``."""

    model_config = ConfigDict(frozen=True)

    before: int = Field(ge=0)
    after: int = Field(ge=0)

    def as_pair(self) -> tuple[int, int]:
        return (self.before, self.after)
