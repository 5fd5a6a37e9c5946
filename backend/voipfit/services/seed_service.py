"""Idempotent default-content initializer run at startup and from scripts/seed_data.py.

Every step checks whether its key or table already holds data before
writing, so running the initializer repeatedly never duplicates rows.
Steps are independent: a failing step is rolled back and logged, and the
remaining steps still run.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from voipfit.config import Settings
from voipfit.models.news_article import NewsArticle
from voipfit.models.service import Service
from voipfit.schemas.content import normalize_section
from voipfit.services import auth_service, content_service

logger = logging.getLogger(__name__)

DEFAULT_CONTENT = {
    "hero": {
        "title": "VoipFit",
        "subtitle": "National High-Tech Enterprise",
        "description": "Excellent products, sincere service, and mutual win with customers",
    },
    "stats": {
        "establishedYear": "2018",
        "countries": "150+",
        "dailyCalls": "5M+",
        "uptime": "99.9%",
    },
    "about": {
        "title": "About VoipFit",
        "description": (
            "Since 2018, VoipFit has been at the forefront of telecommunications innovation, "
            "providing reliable and cutting-edge communication solutions to businesses and "
            "individuals across 150+ countries worldwide."
        ),
        "mission": (
            "Our mission is to deliver excellent products with sincere service, creating mutual "
            "win opportunities with our customers through advanced technology and unwavering "
            "commitment to quality."
        ),
        "vision": "Leading global telecom transformation",
        "values": "Innovation, Quality, Trust",
    },
}

DEFAULT_SERVICES = [
    {
        "name": "SMS Service",
        "description": "Reliable and fast SMS delivery with global reach and advanced features",
        "features": ["Global SMS delivery", "99.9% delivery rate", "API integration"],
        "icon": "MessageSquare",
        "color": "emerald",
    },
    {
        "name": "Voice Service",
        "description": "Crystal-clear voice calls with advanced routing and quality optimization",
        "features": ["HD voice quality", "Smart routing", "Call analytics"],
        "icon": "Phone",
        "color": "amber",
    },
    {
        "name": "Data Service",
        "description": "High-speed data connectivity with secure transmission and monitoring",
        "features": ["High-speed connectivity", "Secure transmission", "Real-time monitoring"],
        "icon": "Database",
        "color": "blue",
    },
]

_UNSPLASH = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=400"

DEFAULT_NEWS = [
    {
        "title": "VoipFit Expands 5G Network Coverage",
        "excerpt": "Enhanced connectivity reaching 20 new countries with ultra-fast 5G infrastructure.",
        "content": (
            "VoipFit continues to expand its global 5G network coverage, bringing ultra-fast "
            "connectivity to 20 new countries. This expansion represents our commitment to "
            "providing cutting-edge telecommunications infrastructure worldwide."
        ),
        "image_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64" + _UNSPLASH,
    },
    {
        "title": "Industry Excellence Award 2024",
        "excerpt": "VoipFit recognized for outstanding innovation in telecommunications services.",
        "content": (
            "We are proud to announce that VoipFit has been awarded the Industry Excellence "
            "Award 2024 for our innovative telecommunications solutions and exceptional "
            "customer service."
        ),
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d" + _UNSPLASH,
    },
    {
        "title": "Strategic Partnership Announcement",
        "excerpt": "New alliance strengthening our global telecommunications network.",
        "content": (
            "VoipFit announces a strategic partnership that will significantly strengthen our "
            "global telecommunications network and enhance service delivery to our customers "
            "worldwide."
        ),
        "image_url": "https://images.unsplash.com/photo-1600880292203-757bb62b4baf" + _UNSPLASH,
    },
]


def _seed_section(key: str) -> Callable[[Session, Settings], bool]:
    def step(db: Session, settings: Settings) -> bool:
        if content_service.find_content(db, key):
            return False
        content_service.upsert_content(db, key, normalize_section(key, DEFAULT_CONTENT[key]))
        return True

    return step


def seed_services(db: Session, settings: Settings) -> bool:
    if db.query(Service.id).first():
        return False
    db.add_all([Service(is_active=True, **row) for row in DEFAULT_SERVICES])
    db.commit()
    return True


def seed_news(db: Session, settings: Settings) -> bool:
    if db.query(NewsArticle.id).first():
        return False
    db.add_all([NewsArticle(is_published=True, **row) for row in DEFAULT_NEWS])
    db.commit()
    return True


def seed_admin(db: Session, settings: Settings) -> bool:
    if auth_service.get_admin_by_username(db, settings.DEFAULT_ADMIN_USERNAME):
        return False
    auth_service.create_admin(
        db,
        settings.DEFAULT_ADMIN_USERNAME,
        settings.DEFAULT_ADMIN_PASSWORD,
        rounds=settings.BCRYPT_ROUNDS,
    )
    return True


SEED_STEPS: List[Tuple[str, Callable[[Session, Settings], bool]]] = [
    ("content:hero", _seed_section("hero")),
    ("content:stats", _seed_section("stats")),
    ("content:about", _seed_section("about")),
    ("services", seed_services),
    ("news", seed_news),
    ("admin", seed_admin),
]


def initialize_default_content(db: Session, settings: Settings) -> Dict[str, Optional[bool]]:
    """Run every seed step.

    Returns step name -> True (rows written), False (data already present)
    or None (the step failed and was rolled back).
    """
    results: Dict[str, Optional[bool]] = {}
    for name, step in SEED_STEPS:
        try:
            results[name] = step(db, settings)
        except Exception:
            db.rollback()
            logger.exception("Seed step '%s' failed", name)
            results[name] = None
            continue
        if results[name]:
            logger.info("Seed step '%s' wrote default rows", name)
        else:
            logger.debug("Seed step '%s' skipped, data already present", name)
    return results
