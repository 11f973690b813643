"""
Small helpers shared by the request-body validators.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


def as_mapping(body: Any) -> dict[str, Any]:
    # Anything that isn't a JSON object is validated as an empty body.
    return body if isinstance(body, dict) else {}


def reject(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


# SERIAL ids are int4; larger values never exist and asyncpg cannot encode them.
MAX_ROW_ID = 2**31 - 1
