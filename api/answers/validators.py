"""
Answer request-body validation.
"""

from __future__ import annotations

from typing import Any

from fastapi import Body

from core.validation import as_mapping, reject

from .schemas import MAX_ANSWER_LENGTH, AnswerPayload


def validate_answer(body: Any) -> AnswerPayload:
    content = as_mapping(body).get("content")
    if not content:
        raise reject("Content is required for the answer.")
    # Numbers and objects have no length to check.
    if not isinstance(content, str):
        raise reject("Content must be a string.")
    if len(content) > MAX_ANSWER_LENGTH:
        raise reject("Answer content must be less than 300 characters.")
    return AnswerPayload(content=content)


async def answer_body(body: Any = Body(default=None)) -> AnswerPayload:
    return validate_answer(body)
