"""
Question persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

QUESTION_COLUMNS = "id, title, description, category"


def like_pattern(value: str) -> str:
    """
    Wrap `value` for a substring ILIKE match, escaping LIKE wildcards.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def create_question(*, title: str, description: str, category: str) -> None:
    await db.execute(
        """
        INSERT INTO questions (title, description, category)
        VALUES ($1, $2, $3)
        """,
        title,
        description,
        category,
    )


async def list_questions() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        ORDER BY id
        """
    )


async def get_question(question_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        WHERE id = $1
        """,
        question_id,
    )


async def search_questions(*, title: str | None = None, category: str | None = None) -> list[dict[str, Any]]:
    """
    Case-insensitive substring search; supplied filters are ANDed.
    A NULL parameter disables its filter.
    """
    return await db.fetch_all(
        f"""
        SELECT {QUESTION_COLUMNS}
        FROM questions
        WHERE ($1::text IS NULL OR title ILIKE $1)
          AND ($2::text IS NULL OR category ILIKE $2)
        ORDER BY id
        """,
        like_pattern(title) if title else None,
        like_pattern(category) if category else None,
    )


async def update_question(question_id: int, *, title: str, description: str, category: str) -> int:
    """
    Overwrite all editable fields. Returns the number of updated rows (0 or 1).
    """
    return await db.execute(
        """
        UPDATE questions
        SET title = $2,
            description = $3,
            category = $4
        WHERE id = $1
        """,
        question_id,
        title,
        description,
        category,
    )


async def delete_question(question_id: int) -> int:
    return await db.execute(
        """
        DELETE FROM questions
        WHERE id = $1
        """,
        question_id,
    )
