"""FastAPI application factory: settings, database handle, routers, pages and startup seeding."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from voipfit.config import Settings, configure_logging, get_settings
from voipfit.database import Database
from voipfit.exceptions import register_exception_handlers
from voipfit.routers import auth, carousel, contact, content, news, pages, services
from voipfit.services.seed_service import initialize_default_content

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database: Database = app.state.database
    logger.info("Starting %s site (database dialect: %s)", settings.SITE_NAME, database.dialect)
    database.create_all()
    if settings.SEED_ON_STARTUP:
        with database.session() as db:
            initialize_default_content(db, settings)
    yield
    logger.info("Shutting down %s site", settings.SITE_NAME)
    database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=f"{settings.SITE_NAME} Site API",
        description="Marketing site content, contact inbox and admin panel API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(content.router)
    app.include_router(contact.router)
    app.include_router(news.router)
    app.include_router(services.router)
    app.include_router(carousel.router)
    app.include_router(auth.router)
    app.include_router(pages.router)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok", "service": settings.SITE_NAME}

    app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")
    return app


app = create_app()
