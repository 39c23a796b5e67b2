"""
Answer and vote API endpoints.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, status

from core.openapi import error_responses
from core.validation import MAX_ROW_ID

from . import service

router = APIRouter()

QuestionId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]
AnswerId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


@router.post(
    "/questions/{question_id}/answers",
    status_code=status.HTTP_201_CREATED,
    summary="Answer a question",
    response_description="Answer created successfully.",
    responses=error_responses(
        {
            400: "Invalid question id, missing content, unexpected fields, or content over 300 characters.",
            404: "Question not found.",
            500: "Unable to create answer.",
        }
    ),
)
async def create_answer(question_id: QuestionId, body: Any = Body(...)) -> dict:
    return await service.create_answer(question_id, body)


@router.get(
    "/questions/{question_id}/answers",
    summary="List every answer of a question",
    responses=error_responses(
        {
            400: "Invalid question id.",
            404: "Question not found.",
            500: "Unable to fetch answers.",
        }
    ),
)
async def list_answers(question_id: QuestionId) -> dict:
    return await service.list_answers(question_id)


@router.delete(
    "/questions/{question_id}/answers",
    summary="Delete every answer of a question",
    response_description="All answers for the question have been deleted successfully.",
    responses=error_responses(
        {
            400: "Invalid question id.",
            404: "Question not found.",
            500: "Unable to delete answers.",
        }
    ),
)
async def delete_answers(question_id: QuestionId) -> dict:
    return await service.delete_answers(question_id)


@router.post(
    "/questions/{question_id}/vote",
    summary="Upvote (1) or downvote (-1) a question",
    response_description="Vote on the question has been recorded successfully.",
    responses=error_responses(
        {
            400: "Invalid vote value. Only 1 or -1 are allowed.",
            404: "Question not found.",
            500: "Unable to vote question.",
        }
    ),
)
async def vote_question(question_id: QuestionId, body: Any = Body(...)) -> dict:
    return await service.vote_question(question_id, body)


@router.post(
    "/answers/{answer_id}/vote",
    summary="Upvote (1) or downvote (-1) an answer",
    response_description="Vote on the answer has been recorded successfully.",
    responses=error_responses(
        {
            400: "Invalid vote value. Only 1 or -1 are allowed.",
            404: "Answer not found.",
            500: "Unable to vote answer.",
        }
    ),
)
async def vote_answer(answer_id: AnswerId, body: Any = Body(...)) -> dict:
    return await service.vote_answer(answer_id, body)
