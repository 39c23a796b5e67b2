"""
Pydantic schemas for answer and vote endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from core.validation import RequestSchema

MAX_ANSWER_LENGTH = 300
ALLOWED_VOTES = (1, -1)


class AnswerPayload(RequestSchema):
    # Length is counted in Unicode code points.
    content: str = Field(..., min_length=1, max_length=MAX_ANSWER_LENGTH)


class VotePayload(RequestSchema):
    vote: int

    @field_validator("vote", mode="before")
    @classmethod
    def check_vote_value(cls, value: Any) -> int:
        # bool is an int subclass; reject it along with "1", 1.0, 0, 2, ...
        if type(value) is not int or value not in ALLOWED_VOTES:
            raise ValueError("vote must be exactly 1 or -1")
        return value
