"""
Answer persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, DatabaseError

ANSWER_COLUMNS = "id, question_id, content, created_at"

INSERT_ANSWER = f"""
    INSERT INTO answers (question_id, content)
    VALUES ($1, $2)
    RETURNING {ANSWER_COLUMNS}
"""

SELECT_ANSWERS_BY_QUESTION = f"""
    SELECT {ANSWER_COLUMNS}
    FROM answers
    WHERE question_id = $1
    ORDER BY id ASC
"""

ANSWER_EXISTS = """
    SELECT 1 AS ok
    FROM answers
    WHERE id = $1
    LIMIT 1
"""

DELETE_ANSWERS_BY_QUESTION = """
    DELETE FROM answers
    WHERE question_id = $1
"""


async def create_answer(db: Database, question_id: int, *, content: str) -> dict[str, Any]:
    row = await db.fetch_one(INSERT_ANSWER, question_id, content)
    if row is None:
        raise DatabaseError("Failed to insert answer.")
    return row


async def list_answers(db: Database, question_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(SELECT_ANSWERS_BY_QUESTION, question_id)


async def answer_exists(db: Database, answer_id: int) -> bool:
    row = await db.fetch_one(ANSWER_EXISTS, answer_id)
    return row is not None


async def delete_answers(db: Database, question_id: int) -> int:
    return await db.execute(DELETE_ANSWERS_BY_QUESTION, question_id)
