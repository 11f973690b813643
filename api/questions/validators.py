"""
Question request-body validation.

Fields are checked in order (title, description, category) and the first
violation wins.
"""

from __future__ import annotations

from typing import Any

from fastapi import Body

from core.validation import as_mapping, reject

from .schemas import QuestionPayload

QUESTION_FIELDS = ("title", "description", "category")


def validate_question(body: Any) -> QuestionPayload:
    data = as_mapping(body)
    for field in QUESTION_FIELDS:
        value = data.get(field)
        label = field.capitalize()
        if not value:
            raise reject(f"{label} is required")
        if not isinstance(value, str):
            raise reject(f"{label} must be a string")
    return QuestionPayload(
        title=data["title"],
        description=data["description"],
        category=data["category"],
    )


async def question_body(body: Any = Body(default=None)) -> QuestionPayload:
    return validate_question(body)
