"""
Question business logic.

Scope:
- create / read / update / delete questions
- category + keyword search
- the existence check other features run before touching a question
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core.db import Database

from . import repository
from .schemas import QuestionPayload

QUESTION_NOT_FOUND = "Question not found."

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


async def ensure_question_exists(db: Database, question_id: int) -> None:
    if not await repository.question_exists(db, question_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUESTION_NOT_FOUND)


async def create_question(db: Database, payload: QuestionPayload) -> dict[str, Any]:
    row = await repository.create_question(
        db,
        title=payload.title,
        description=payload.description,
        category=payload.category,
    )
    logger.info("question_created id=%s category=%s", row["id"], row["category"])
    return row


async def list_questions(db: Database) -> list[dict[str, Any]]:
    rows = await repository.list_questions(db)
    if not rows:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No questions found.")
    return rows


async def search_questions(
    db: Database,
    *,
    category: str | None = None,
    keywords: str | None = None,
) -> list[dict[str, Any]]:
    """
    Both filters are optional and combine with AND.

    `category` must match exactly; `keywords` is a case-insensitive substring
    match against title or description.
    """
    rows = await repository.search_questions(
        db,
        category=_clean(category),
        keywords=_clean(keywords),
    )
    if not rows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No questions match the search.",
        )
    return rows


async def get_question(db: Database, question_id: int) -> dict[str, Any]:
    row = await repository.get_question(db, question_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUESTION_NOT_FOUND)
    return row


async def update_question(db: Database, question_id: int, payload: QuestionPayload) -> int:
    # Unconditional: an unknown id updates nothing and still succeeds.
    updated = await repository.update_question(
        db,
        question_id,
        title=payload.title,
        description=payload.description,
        category=payload.category,
    )
    logger.info("question_updated id=%s rows=%s", question_id, updated)
    return updated


async def delete_question(db: Database, question_id: int) -> int:
    deleted = await repository.delete_question(db, question_id)
    logger.info("question_deleted id=%s rows=%s", question_id, deleted)
    return deleted
