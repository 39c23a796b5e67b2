"""
Answer and vote persistence (raw SQL).

Inserts that depend on a parent row use an existence-guarded
`INSERT ... SELECT ... WHERE id = $1`, so the parent check and the write are
one statement. A `None` return means the parent row does not exist.
"""

from __future__ import annotations

from typing import Any

from core import db


async def create_answer(question_id: int, *, content: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO answers (question_id, content)
        SELECT q.id, $2
        FROM questions q
        WHERE q.id = $1
        RETURNING id
        """,
        question_id,
        content,
    )


async def list_answers_for_question(question_id: int) -> list[dict[str, Any]] | None:
    """
    Return every answer of a question, or None when the question is missing.
    """
    async with db.transaction() as conn:
        question = await conn.fetchrow(
            """
            SELECT 1 AS ok
            FROM questions
            WHERE id = $1
            FOR SHARE
            """,
            question_id,
        )
        if question is None:
            return None
        rows = await conn.fetch(
            """
            SELECT id, question_id, content
            FROM answers
            WHERE question_id = $1
            ORDER BY id
            """,
            question_id,
        )
        return db.records_to_dicts(rows)


async def delete_answers_for_question(question_id: int) -> int | None:
    """
    Delete all answers of a question. Returns the deleted count, or None when
    the question is missing.
    """
    row = await db.fetch_one(
        """
        WITH target AS (
            SELECT id
            FROM questions
            WHERE id = $1
        ),
        deleted AS (
            DELETE FROM answers
            WHERE question_id IN (SELECT id FROM target)
            RETURNING id
        )
        SELECT
          (SELECT count(*) FROM target) AS question_count,
          (SELECT count(*) FROM deleted) AS deleted_count
        """,
        question_id,
    )
    if row is None or int(row.get("question_count", 0)) == 0:
        return None
    return int(row.get("deleted_count", 0))


async def add_question_vote(question_id: int, *, vote: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO question_votes (question_id, vote)
        SELECT q.id, $2
        FROM questions q
        WHERE q.id = $1
        RETURNING id
        """,
        question_id,
        vote,
    )


async def add_answer_vote(answer_id: int, *, vote: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO answer_votes (answer_id, vote)
        SELECT a.id, $2
        FROM answers a
        WHERE a.id = $1
        RETURNING id
        """,
        answer_id,
        vote,
    )
