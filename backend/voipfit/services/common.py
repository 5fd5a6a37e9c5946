"""Helpers shared by the entity services."""

from typing import Any, Dict, Iterable

from fastapi import HTTPException
from pydantic import BaseModel


def update_payload(data: BaseModel, required: Iterable[str]) -> Dict[str, Any]:
    """Fields the client actually sent; optional columns may be cleared with null."""
    payload = data.model_dump(exclude_unset=True)
    cleared = [key for key in required if key in payload and payload[key] is None]
    if cleared:
        raise HTTPException(status_code=400, detail=f"{', '.join(cleared)} cannot be cleared")
    return payload
