"""
Pydantic schemas for vote endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

VOTE_VALUES = (1, -1)


class VotePayload(BaseModel):
    vote: Literal[1, -1]
