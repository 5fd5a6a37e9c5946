"""Contact message schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from voipfit.schemas.common import CamelModel


class ContactMessageCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)


class ContactMessageOut(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    is_read: bool
