"""
Answer business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core.db import Database
from questions import repository as question_repository
from questions import service as question_service

from . import repository
from .schemas import AnswerPayload

ANSWER_NOT_FOUND = "Answer not found."

logger = logging.getLogger(__name__)


async def ensure_answer_exists(db: Database, answer_id: int) -> None:
    if not await repository.answer_exists(db, answer_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ANSWER_NOT_FOUND)


async def create_answer(db: Database, question_id: int, payload: AnswerPayload) -> dict[str, Any]:
    await question_service.ensure_question_exists(db, question_id)
    row = await repository.create_answer(db, question_id, content=payload.content)
    logger.info("answer_created id=%s question_id=%s", row["id"], question_id)
    return row


async def list_answers(db: Database, question_id: int) -> list[dict[str, Any]]:
    rows = await repository.list_answers(db, question_id)
    if not rows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No answers found for this question.",
        )
    return rows


async def delete_question_with_answers(db: Database, question_id: int) -> int:
    """
    Remove every answer of a question, then the question itself.

    Two independent statements; returns the number of answers removed.
    """
    await question_service.ensure_question_exists(db, question_id)
    removed = await repository.delete_answers(db, question_id)
    await question_repository.delete_question(db, question_id)
    logger.info("question_deleted_with_answers id=%s answers=%s", question_id, removed)
    return removed
