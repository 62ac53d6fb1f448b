"""Shared fixtures: a throwaway SQLite database and a test client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="insyd-notify-tests-"))
TEST_DB_PATH = TEST_DB_DIR / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["DEMO_USERS"] = '["alice", "bob", "carol", "dave"]'
os.environ["APP_TIMEZONE"] = "UTC"

from fastapi.testclient import TestClient  # noqa: E402

from insyd_notify.config import reset_settings_cache  # noqa: E402

reset_settings_cache()


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables."""

    from insyd_notify.infrastructure import database, models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield


@pytest.fixture()
def db_session():
    """Return a session bound to the test database."""

    from insyd_notify.infrastructure.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app():
    from main import create_app

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    """Return a test client bound to a clean application instance."""

    with TestClient(app) as test_client:
        yield test_client
