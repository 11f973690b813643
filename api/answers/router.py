"""
Answer API endpoints (mounted under /questions).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from core.db import Database, get_db
from core.validation import MAX_ROW_ID

from . import service
from .schemas import AnswerPayload
from .validators import answer_body

router = APIRouter()


@router.post("/{question_id}/answers", status_code=status.HTTP_201_CREATED)
async def create_answer(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    payload: AnswerPayload = Depends(answer_body),
    db: Database = Depends(get_db),
) -> dict:
    row = await service.create_answer(db, question_id, payload)
    return {
        "message": f"Created answer id ({row['id']}) for question id ({question_id}) successfully.",
        "data": row,
    }


@router.get("/{question_id}/answers")
async def list_answers(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Database = Depends(get_db),
) -> dict:
    return {"data": await service.list_answers(db, question_id)}


@router.delete("/{question_id}/answers")
async def delete_answers(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Database = Depends(get_db),
) -> dict:
    removed = await service.delete_question_with_answers(db, question_id)
    return {
        "message": (
            f"Deleted question id ({question_id}) and its {removed} answer(s) successfully."
        ),
    }
