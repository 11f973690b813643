"""
Question persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, DatabaseError

QUESTION_COLUMNS = "id, title, description, category, created_at, updated_at"

INSERT_QUESTION = f"""
    INSERT INTO questions (title, description, category)
    VALUES ($1, $2, $3)
    RETURNING {QUESTION_COLUMNS}
"""

SELECT_QUESTIONS = f"""
    SELECT {QUESTION_COLUMNS}
    FROM questions
    ORDER BY id ASC
"""

# $1 = category (exact) or NULL, $2 = escaped keyword pattern or NULL.
SEARCH_QUESTIONS = f"""
    SELECT {QUESTION_COLUMNS}
    FROM questions
    WHERE ($1::text IS NULL OR category = $1)
      AND (
        $2::text IS NULL
        OR title ILIKE ('%' || $2 || '%') ESCAPE '\\'
        OR description ILIKE ('%' || $2 || '%') ESCAPE '\\'
      )
    ORDER BY id ASC
"""

SELECT_QUESTION_BY_ID = f"""
    SELECT {QUESTION_COLUMNS}
    FROM questions
    WHERE id = $1
"""

QUESTION_EXISTS = """
    SELECT 1 AS ok
    FROM questions
    WHERE id = $1
    LIMIT 1
"""

UPDATE_QUESTION = """
    UPDATE questions
    SET title = $2,
        description = $3,
        category = $4,
        updated_at = now()
    WHERE id = $1
"""

DELETE_QUESTION = """
    DELETE FROM questions
    WHERE id = $1
"""


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def create_question(db: Database, *, title: str, description: str, category: str) -> dict[str, Any]:
    row = await db.fetch_one(INSERT_QUESTION, title, description, category)
    if row is None:
        raise DatabaseError("Failed to insert question.")
    return row


async def list_questions(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(SELECT_QUESTIONS)


async def search_questions(
    db: Database,
    *,
    category: str | None = None,
    keywords: str | None = None,
) -> list[dict[str, Any]]:
    pattern = escape_like(keywords) if keywords is not None else None
    return await db.fetch_all(SEARCH_QUESTIONS, category, pattern)


async def get_question(db: Database, question_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(SELECT_QUESTION_BY_ID, question_id)


async def question_exists(db: Database, question_id: int) -> bool:
    row = await db.fetch_one(QUESTION_EXISTS, question_id)
    return row is not None


async def update_question(
    db: Database,
    question_id: int,
    *,
    title: str,
    description: str,
    category: str,
) -> int:
    return await db.execute(UPDATE_QUESTION, question_id, title, description, category)


async def delete_question(db: Database, question_id: int) -> int:
    return await db.execute(DELETE_QUESTION, question_id)
