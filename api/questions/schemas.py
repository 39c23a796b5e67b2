"""
Pydantic schemas for question endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.validation import RequestSchema


class QuestionPayload(RequestSchema):
    """
    Body for both create and update: all three fields are required.
    """

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
