"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from shortener.config import Settings
from shortener.database import create_db_engine, create_session_factory, init_db
from shortener.main import create_app
from shortener.store import UrlStore


@pytest.fixture
def settings(tmp_path):
    """Settings backed by a temporary SQLite file."""
    return Settings(database_url=f"sqlite:///{tmp_path}/data/links.db")


@pytest.fixture
def store(settings):
    """Store with the `urls` table created."""
    engine = create_db_engine(settings)
    init_db(engine)
    yield UrlStore(create_session_factory(engine))
    engine.dispose()


@pytest.fixture
def unreachable_store(tmp_path):
    """Store whose database file cannot be opened."""
    blocker = tmp_path / "not_a_directory"
    blocker.write_text("")
    settings = Settings(database_url=f"sqlite:///{blocker}/links.db")
    return UrlStore.from_settings(settings)


@pytest.fixture
def client(settings, store):
    """Test client for the app."""
    app = create_app(settings, store=store)
    with TestClient(app) as tc:
        yield tc


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
