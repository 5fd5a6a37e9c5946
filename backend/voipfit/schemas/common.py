"""Shared schema base: camelCase on the wire, snake_case in Python."""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_ROW_ID = 2**63 - 1

# Path id; anything outside the column range is a 400, not a driver error.
RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SuccessResponse(CamelModel):
    success: bool = True
