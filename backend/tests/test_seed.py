"""Default-content initializer tests."""

import importlib.util
from pathlib import Path

from fastapi.testclient import TestClient

from voipfit.config import Settings
from voipfit.main import create_app
from voipfit.models.admin_user import AdminUser
from voipfit.models.news_article import NewsArticle
from voipfit.models.service import Service
from voipfit.models.site_content import SiteContent
from voipfit.services import content_service, seed_service


def test_initializer_seeds_every_step(db, settings):
    results = seed_service.initialize_default_content(db, settings)

    assert results == {
        "content:hero": True,
        "content:stats": True,
        "content:about": True,
        "services": True,
        "news": True,
        "admin": True,
    }
    assert content_service.get_content(db, "hero").content["title"] == "VoipFit"
    assert content_service.get_content(db, "stats").content["dailyCalls"] == "5M+"
    assert db.query(Service).count() == 3
    assert db.query(NewsArticle).filter(NewsArticle.is_published == True).count() == 3  # noqa: E712
    admin = db.query(AdminUser).one()
    assert admin.username == "admin"
    assert admin.password != settings.DEFAULT_ADMIN_PASSWORD


def test_initializer_is_idempotent(db, settings):
    seed_service.initialize_default_content(db, settings)
    second = seed_service.initialize_default_content(db, settings)

    assert not any(second.values())
    assert db.query(Service).count() == 3
    assert db.query(NewsArticle).count() == 3
    assert db.query(SiteContent).count() == 3
    assert db.query(AdminUser).count() == 1


def test_initializer_keeps_edited_content(db, settings):
    content_service.upsert_content(db, "hero", {"title": "Edited"})

    results = seed_service.initialize_default_content(db, settings)

    assert results["content:hero"] is False
    assert content_service.get_content(db, "hero").content == {"title": "Edited"}


def test_failed_step_does_not_abort_the_rest(db, settings, monkeypatch):
    def broken_step(session, _settings):
        raise RuntimeError("boom")

    monkeypatch.setattr(seed_service, "SEED_STEPS", [("broken", broken_step)] + seed_service.SEED_STEPS)

    results = seed_service.initialize_default_content(db, settings)

    assert results["broken"] is None
    assert results["services"] is True
    assert results["admin"] is True
    assert db.query(Service).count() == 3


def test_startup_seeding_enables_default_admin_login(tmp_path):
    settings = Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'startup.db'}",
        SEED_ON_STARTUP=True,
        BCRYPT_ROUNDS=4,
    )
    app = create_app(settings)
    with TestClient(app) as client:
        hero = client.get("/api/content/hero")
        assert hero.status_code == 200
        assert hero.json()["content"]["subtitle"] == "National High-Tech Enterprise"

        assert len(client.get("/api/services").json()) == 3
        assert len(client.get("/api/news").json()) == 3

        login = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
        assert login.status_code == 200, login.text
        assert login.json()["success"] is True

    # A second process start against the same database adds nothing.
    with TestClient(create_app(settings)) as client:
        assert len(client.get("/api/admin/services").json()) == 3
    app.state.database.drop_all()


def test_seed_script_reports_failed_steps(settings, database, monkeypatch, capsys):
    script = Path(__file__).resolve().parents[1] / "scripts" / "seed_data.py"
    spec = importlib.util.spec_from_file_location("seed_data_script", script)
    seed_data = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(seed_data)

    def broken_step(session, _settings):
        raise RuntimeError("boom")

    monkeypatch.setattr(seed_service, "SEED_STEPS", [("broken", broken_step), ("news", seed_service.seed_news)])

    results = seed_data.seed(settings.DATABASE_URL)

    assert results == {"broken": None, "news": True}
    out = capsys.readouterr().out
    assert "broken: FAILED" in out
    assert "news: seeded" in out
