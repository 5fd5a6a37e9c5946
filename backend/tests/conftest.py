import pytest
from fastapi.testclient import TestClient

from voipfit.config import Settings
from voipfit.main import create_app
from voipfit.services import auth_service


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test_voipfit.db'}",
        SEED_ON_STARTUP=False,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def database(app):
    database = app.state.database
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def db(database):
    with database.session() as session:
        yield session


@pytest.fixture
def client(app, database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed_admin(db):
    return auth_service.create_admin(db, "admin", "s3cret-pass", rounds=4)