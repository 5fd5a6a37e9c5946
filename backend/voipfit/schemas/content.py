"""Request/response contracts for the site content store.

Each known section key maps to exactly one document shape; the write
payload ``{key, content}`` is validated against the shape selected by
``key`` and stored in its normalized (camelCase) form.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Type

from pydantic import ConfigDict, ValidationError, model_validator

from voipfit.schemas.common import CamelModel


class SectionModel(CamelModel):
    model_config = ConfigDict(extra="forbid")


class HeroContent(SectionModel):
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None


class StatsContent(SectionModel):
    established_year: Optional[str] = None
    countries: Optional[str] = None
    daily_calls: Optional[str] = None
    uptime: Optional[str] = None


class AboutContent(SectionModel):
    title: str
    description: str
    mission: Optional[str] = None
    vision: Optional[str] = None
    values: Optional[str] = None


SECTION_MODELS: Dict[str, Type[SectionModel]] = {
    "hero": HeroContent,
    "stats": StatsContent,
    "about": AboutContent,
}


def normalize_section(key: str, content: Any) -> Dict[str, Any]:
    model = SECTION_MODELS.get(key)
    if model is None:
        raise ValueError(f"unknown content key '{key}'")
    return model.model_validate(content).model_dump(by_alias=True, exclude_none=True)


class SiteContentUpdate(CamelModel):
    key: str
    content: Dict[str, Any]

    @model_validator(mode="after")
    def validate_section(self):
        try:
            self.content = normalize_section(self.key, self.content)
        except ValidationError as exc:
            raise ValueError(f"invalid {self.key} content: {exc.error_count()} error(s)") from exc
        return self


class SiteContentOut(CamelModel):
    id: int
    key: str
    content: Dict[str, Any]
    updated_at: datetime
