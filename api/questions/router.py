"""
Question API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from core.db import Database, get_db
from core.validation import MAX_ROW_ID

from . import service
from .schemas import QuestionPayload
from .validators import question_body

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_question(
    payload: QuestionPayload = Depends(question_body),
    db: Database = Depends(get_db),
) -> dict:
    row = await service.create_question(db, payload)
    return {
        "message": f"Created question id ({row['id']}) successfully.",
        "data": row,
    }


@router.get("")
async def list_questions(db: Database = Depends(get_db)) -> dict:
    return {"data": await service.list_questions(db)}


# Declared before "/{question_id}" so "search" is not parsed as an id.
@router.get("/search")
async def search_questions(
    category: str | None = Query(default=None),
    keywords: str | None = Query(default=None),
    db: Database = Depends(get_db),
) -> dict:
    rows = await service.search_questions(db, category=category, keywords=keywords)
    return {"data": rows}


@router.get("/{question_id}")
async def get_question(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Database = Depends(get_db),
) -> dict:
    return {"data": await service.get_question(db, question_id)}


@router.put("/{question_id}")
async def update_question(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    payload: QuestionPayload = Depends(question_body),
    db: Database = Depends(get_db),
) -> dict:
    await service.update_question(db, question_id, payload)
    return {"message": f"Updated question id ({question_id}) successfully."}


@router.delete("/{question_id}")
async def delete_question(
    question_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Database = Depends(get_db),
) -> dict:
    await service.delete_question(db, question_id)
    return {"message": f"Deleted question id ({question_id}) successfully."}
