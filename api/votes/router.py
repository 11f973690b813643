"""
Vote API endpoints (mounted under /questions).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from core.db import Database, get_db
from core.validation import MAX_ROW_ID

from . import service
from .schemas import VotePayload
from .validators import vote_body

router = APIRouter()


@router.put("/answers/{answer_id}/vote")
async def vote_answer(
    answer_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    payload: VotePayload = Depends(vote_body),
    db: Database = Depends(get_db),
) -> dict:
    row = await service.vote_answer(db, answer_id, payload)
    return {
        "message": f"Voted on answer id ({answer_id}) successfully.",
        "data": row,
    }


@router.put("/{question_id}/vote")
async def vote_question(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    payload: VotePayload = Depends(vote_body),
    db: Database = Depends(get_db),
) -> dict:
    row = await service.vote_question(db, question_id, payload)
    return {
        "message": f"Voted on question id ({question_id}) successfully.",
        "data": row,
    }
