"""
Vote request-body validation.
"""

from __future__ import annotations

from typing import Any

from fastapi import Body

from core.validation import as_mapping, reject

from .schemas import VOTE_VALUES, VotePayload


def validate_vote(body: Any) -> VotePayload:
    vote = as_mapping(body).get("vote")
    # bool is an int subclass; True must not count as an upvote.
    if isinstance(vote, bool) or not isinstance(vote, (int, float)) or vote not in VOTE_VALUES:
        raise reject("Invalid vote value.")
    return VotePayload(vote=int(vote))


async def vote_body(body: Any = Body(default=None)) -> VotePayload:
    return validate_vote(body)
