"""Service catalog schemas."""

from typing import List, Optional

from pydantic import Field, field_validator

from voipfit.schemas.common import CamelModel

SERVICE_ICONS = ("MessageSquare", "Phone", "Database")
SERVICE_COLORS = ("emerald", "amber", "blue")


def _check_icon(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in SERVICE_ICONS:
        raise ValueError(f"icon must be one of {', '.join(SERVICE_ICONS)}")
    return value


def _check_color(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in SERVICE_COLORS:
        raise ValueError(f"color must be one of {', '.join(SERVICE_COLORS)}")
    return value


def _strip_features(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    return [item.strip() for item in value if item and item.strip()]


class ServiceBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    features: List[str] = []
    icon: str = "MessageSquare"
    color: str = "blue"
    is_active: bool = True

    @field_validator("icon")
    @classmethod
    def check_icon(cls, value):
        return _check_icon(value)

    @field_validator("color")
    @classmethod
    def check_color(cls, value):
        return _check_color(value)

    @field_validator("features")
    @classmethod
    def strip_features(cls, value):
        return _strip_features(value)


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, min_length=1)
    features: Optional[List[str]] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("icon")
    @classmethod
    def check_icon(cls, value):
        return _check_icon(value)

    @field_validator("color")
    @classmethod
    def check_color(cls, value):
        return _check_color(value)

    @field_validator("features")
    @classmethod
    def strip_features(cls, value):
        return _strip_features(value)


class ServiceOut(CamelModel):
    # No allow-list checks; stored rows are served as-is.
    id: int
    name: str
    description: str
    features: List[str] = []
    icon: str
    color: str
    is_active: bool
