"""
Vote business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from answers import service as answer_service
from core.db import Database
from questions import service as question_service

from . import repository
from .schemas import VotePayload

logger = logging.getLogger(__name__)


async def vote_question(db: Database, question_id: int, payload: VotePayload) -> dict[str, Any]:
    await question_service.ensure_question_exists(db, question_id)
    row = await repository.set_question_vote(db, question_id, vote=payload.vote)
    logger.info("question_voted id=%s vote=%s", question_id, payload.vote)
    return row


async def vote_answer(db: Database, answer_id: int, payload: VotePayload) -> dict[str, Any]:
    await answer_service.ensure_answer_exists(db, answer_id)
    row = await repository.set_answer_vote(db, answer_id, vote=payload.vote)
    logger.info("answer_voted id=%s vote=%s", answer_id, payload.vote)
    return row
