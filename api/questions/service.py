"""
Question business logic.

Each operation validates its input first, then issues its queries, then
shapes the response body (`{"data": ...}` for reads, `{"message": ...}` for
writes).
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import InvalidRequest, NotFound, persistence_errors
from core.validation import is_blank, validate_body

from . import repository, schemas

logger = logging.getLogger(__name__)

QUESTION_NOT_FOUND = "Question not found."


async def create_question(body: Any) -> dict:
    payload = validate_body(schemas.QuestionPayload, body)
    with persistence_errors("Unable to create question."):
        await repository.create_question(
            title=payload.title,
            description=payload.description,
            category=payload.category,
        )
    logger.info("question_created category=%r", payload.category)
    return {"message": "Question created successfully."}


async def list_questions() -> dict:
    with persistence_errors("Unable to fetch questions."):
        rows = await repository.list_questions()
    return {"data": rows}


async def get_question(question_id: int) -> dict:
    with persistence_errors("Unable to fetch question."):
        row = await repository.get_question(question_id)
    if row is None:
        raise NotFound(QUESTION_NOT_FOUND)
    return {"data": row}


async def search_questions(*, title: str | None = None, category: str | None = None) -> dict:
    # Blank values count as absent; supplied values are matched as given.
    title = None if is_blank(title) else title
    category = None if is_blank(category) else category
    if title is None and category is None:
        raise InvalidRequest("Provide at least one search parameter: category or title.")

    with persistence_errors("Unable to search questions."):
        rows = await repository.search_questions(title=title, category=category)
    return {"data": rows}


async def update_question(question_id: int, body: Any) -> dict:
    payload = validate_body(schemas.QuestionPayload, body)
    with persistence_errors("Unable to update question."):
        updated = await repository.update_question(
            question_id,
            title=payload.title,
            description=payload.description,
            category=payload.category,
        )
    if updated == 0:
        raise NotFound(QUESTION_NOT_FOUND)
    logger.info("question_updated question_id=%s", question_id)
    return {"message": "Question updated successfully."}


async def delete_question(question_id: int) -> dict:
    with persistence_errors("Unable to delete question."):
        deleted = await repository.delete_question(question_id)
    if deleted == 0:
        raise NotFound(QUESTION_NOT_FOUND)
    logger.info("question_deleted question_id=%s", question_id)
    return {"message": "Question post has been deleted successfully."}
