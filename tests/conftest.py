import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.db.database import Database
from app.main import create_app
from app.services.flashcards import FlashcardService


@pytest.fixture
def test_client(tmp_path, monkeypatch):
    """
    Crée un TestClient avec une base SQLite temporaire (isolée),
    et force quelques variables d'env pour les tests.
    """
    db_path = tmp_path / "flashcards.db"
    # Variables d'env pour les settings
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "Flashcards (tests)")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()

    app = create_app()
    # le "with" déclenche le lifespan (création des tables)
    with TestClient(app) as client:
        yield client

    get_settings.cache_clear()


@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'service.db'}")
    database.create_tables()
    yield database
    database.dispose()


@pytest.fixture
def service(database):
    db = database.session()
    try:
        yield FlashcardService(db)
    finally:
        db.close()
