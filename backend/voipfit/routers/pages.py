"""Server-rendered public home page and admin panel shell."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.service import SERVICE_COLORS, SERVICE_ICONS
from voipfit.services import carousel_service, catalog_service, content_service, news_service

router = APIRouter(include_in_schema=False)

STATS_LABELS = [
    ("establishedYear", "Established"),
    ("countries", "Countries Served"),
    ("dailyCalls", "Daily Calls"),
    ("uptime", "Uptime"),
]


def _section(db: Session, key: str) -> Dict[str, Any]:
    row = content_service.find_content(db, key)
    return dict(row.content) if row else {}


def _service_card(service) -> Dict[str, Any]:
    return {
        "name": service.name,
        "description": service.description,
        "features": list(service.features or []),
        "icon": service.icon if service.icon in SERVICE_ICONS else "MessageSquare",
        "color": service.color if service.color in SERVICE_COLORS else "blue",
    }


def home_context(db: Session, site_name: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    stats = _section(db, "stats")
    context = {
        "site_name": site_name,
        "hero": _section(db, "hero"),
        "about": _section(db, "about"),
        "stats": [(label, stats[key]) for key, label in STATS_LABELS if stats.get(key)],
        "slides": carousel_service.list_active_images(db),
        "services": [_service_card(row) for row in catalog_service.list_active_services(db)],
        "news": news_service.list_published_articles(db),
    }
    if extra:
        context.update(extra)
    return context


@router.get("/", response_class=HTMLResponse)
def home(request: Request, db: Session = Depends(get_db)):
    settings = request.app.state.settings
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "home.html", home_context(db, settings.SITE_NAME))


@router.get("/admin", response_class=HTMLResponse)
def admin_panel(request: Request):
    settings = request.app.state.settings
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "admin.html", {"site_name": settings.SITE_NAME})
