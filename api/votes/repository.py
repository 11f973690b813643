"""
Vote persistence (raw SQL).

One vote row per target; setting a vote overwrites the stored value.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, DatabaseError

UPSERT_QUESTION_VOTE = """
    INSERT INTO question_votes (question_id, vote)
    VALUES ($1, $2)
    ON CONFLICT (question_id) DO UPDATE
    SET vote = EXCLUDED.vote,
        updated_at = now()
    RETURNING question_id, vote, updated_at
"""

UPSERT_ANSWER_VOTE = """
    INSERT INTO answer_votes (answer_id, vote)
    VALUES ($1, $2)
    ON CONFLICT (answer_id) DO UPDATE
    SET vote = EXCLUDED.vote,
        updated_at = now()
    RETURNING answer_id, vote, updated_at
"""


async def set_question_vote(db: Database, question_id: int, *, vote: int) -> dict[str, Any]:
    row = await db.fetch_one(UPSERT_QUESTION_VOTE, question_id, vote)
    if row is None:
        raise DatabaseError("Failed to upsert question vote.")
    return row


async def set_answer_vote(db: Database, answer_id: int, *, vote: int) -> dict[str, Any]:
    row = await db.fetch_one(UPSERT_ANSWER_VOTE, answer_id, vote)
    if row is None:
        raise DatabaseError("Failed to upsert answer vote.")
    return row
