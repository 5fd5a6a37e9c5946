"""News article schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from voipfit.schemas.common import CamelModel


class NewsArticleBase(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    excerpt: str = Field(min_length=1)
    content: str = Field(min_length=1)
    image_url: Optional[str] = None
    is_published: bool = True


class NewsArticleCreate(NewsArticleBase):
    published_at: Optional[datetime] = None


class NewsArticleUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    excerpt: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    is_published: Optional[bool] = None


class NewsArticleOut(CamelModel):
    id: int
    title: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    published_at: datetime
    is_published: bool
