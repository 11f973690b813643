"""
Pydantic schemas for answer endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_ANSWER_LENGTH = 300


class AnswerPayload(BaseModel):
    content: str = Field(..., min_length=1, max_length=MAX_ANSWER_LENGTH)
