"""
Question API endpoints.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query, status

from core.openapi import error_responses
from core.validation import MAX_ROW_ID

from . import service

router = APIRouter()

QuestionId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


@router.post(
    "/questions",
    status_code=status.HTTP_201_CREATED,
    summary="Create a question",
    response_description="Question created successfully.",
    responses=error_responses(
        {
            400: "Missing, empty or unexpected fields in the request body.",
            500: "Unable to create question.",
        }
    ),
)
async def create_question(body: Any = Body(...)) -> dict:
    return await service.create_question(body)


@router.get(
    "/questions",
    summary="List all questions",
    responses=error_responses({500: "Unable to fetch questions."}),
)
async def list_questions() -> dict:
    return await service.list_questions()


# Registered before /questions/{question_id} so "search" is not parsed as an id.
@router.get(
    "/questions/search",
    summary="Search questions by category and/or title",
    description="Case-insensitive substring match. Both filters must hold when both are given.",
    responses=error_responses(
        {
            400: "Neither category nor title was supplied.",
            500: "Unable to search questions.",
        }
    ),
)
async def search_questions(
    category: str | None = Query(default=None, max_length=500),
    title: str | None = Query(default=None, max_length=500),
) -> dict:
    return await service.search_questions(title=title, category=category)


@router.get(
    "/questions/{question_id}",
    summary="Get a question",
    responses=error_responses(
        {
            400: "Invalid question id.",
            404: "Question not found.",
            500: "Unable to fetch question.",
        }
    ),
)
async def get_question(question_id: QuestionId) -> dict:
    return await service.get_question(question_id)


@router.put(
    "/questions/{question_id}",
    summary="Replace a question's title, description and category",
    response_description="Question updated successfully.",
    responses=error_responses(
        {
            400: "Invalid question id, or missing, empty or unexpected fields.",
            404: "Question not found.",
            500: "Unable to update question.",
        }
    ),
)
async def update_question(question_id: QuestionId, body: Any = Body(...)) -> dict:
    return await service.update_question(question_id, body)


@router.delete(
    "/questions/{question_id}",
    summary="Delete a question",
    response_description="Question post has been deleted successfully.",
    responses=error_responses(
        {
            400: "Invalid question id.",
            404: "Question not found.",
            500: "Unable to delete question.",
        }
    ),
)
async def delete_question(question_id: QuestionId) -> dict:
    return await service.delete_question(question_id)
