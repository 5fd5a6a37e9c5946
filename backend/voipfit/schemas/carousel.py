"""Carousel image schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from voipfit.schemas.common import CamelModel


class CarouselImageBase(CamelModel):
    image_url: str = Field(min_length=1, max_length=500)
    title: Optional[str] = None
    description: Optional[str] = None
    order: int = 0
    is_active: bool = True


class CarouselImageCreate(CarouselImageBase):
    pass


class CarouselImageUpdate(CamelModel):
    image_url: Optional[str] = Field(default=None, min_length=1, max_length=500)
    title: Optional[str] = None
    description: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class CarouselMoveRequest(CamelModel):
    direction: Literal["up", "down"]


class CarouselImageOut(CamelModel):
    id: int
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    order: int
    is_active: bool
    created_at: datetime
