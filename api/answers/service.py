"""
Answer and vote business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import NotFound, persistence_errors
from core.validation import validate_body

from . import repository, schemas

logger = logging.getLogger(__name__)

QUESTION_NOT_FOUND = "Question not found."
ANSWER_NOT_FOUND = "Answer not found."
INVALID_VOTE = "Invalid vote value."
ANSWER_TOO_LONG = f"Answer length can't exceed {schemas.MAX_ANSWER_LENGTH} characters."


async def create_answer(question_id: int, body: Any) -> dict:
    # Length is checked here, before the question lookup.
    payload = validate_body(
        schemas.AnswerPayload,
        body,
        messages={"string_too_long": ANSWER_TOO_LONG},
    )
    with persistence_errors("Unable to create answer."):
        row = await repository.create_answer(question_id, content=payload.content)
    if row is None:
        logger.info("answer_rejected_missing_question question_id=%s", question_id)
        raise NotFound(QUESTION_NOT_FOUND)
    logger.info("answer_created question_id=%s answer_id=%s", question_id, row.get("id"))
    return {"message": "Answer created successfully."}


async def list_answers(question_id: int) -> dict:
    with persistence_errors("Unable to fetch answers."):
        rows = await repository.list_answers_for_question(question_id)
    if rows is None:
        raise NotFound(QUESTION_NOT_FOUND)
    return {"data": rows}


async def delete_answers(question_id: int) -> dict:
    with persistence_errors("Unable to delete answers."):
        deleted = await repository.delete_answers_for_question(question_id)
    if deleted is None:
        raise NotFound(QUESTION_NOT_FOUND)
    logger.info("answers_deleted question_id=%s count=%s", question_id, deleted)
    return {"message": "All answers for the question have been deleted successfully."}


async def vote_question(question_id: int, body: Any) -> dict:
    payload = validate_body(schemas.VotePayload, body, message=INVALID_VOTE)
    with persistence_errors("Unable to vote question."):
        row = await repository.add_question_vote(question_id, vote=payload.vote)
    if row is None:
        raise NotFound(QUESTION_NOT_FOUND)
    return {"message": "Vote on the question has been recorded successfully."}


async def vote_answer(answer_id: int, body: Any) -> dict:
    payload = validate_body(schemas.VotePayload, body, message=INVALID_VOTE)
    with persistence_errors("Unable to vote answer."):
        row = await repository.add_answer_vote(answer_id, vote=payload.vote)
    if row is None:
        raise NotFound(ANSWER_NOT_FOUND)
    return {"message": "Vote on the answer has been recorded successfully."}
