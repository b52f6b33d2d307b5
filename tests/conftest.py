"""Shared fixtures: settings pointing at a throwaway SQLite file."""

import asyncio
import sqlite3

import pytest
from fastapi.testclient import TestClient

from meetup_api.app.core.config import Settings
from meetup_api.app.core.db import Database
from meetup_api.app.main import create_app
from meetup_api.app.schemas.meetup import MeetupCreate
from meetup_api.app.services.meetup_service import MeetupService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        host="127.0.0.1",
        port=8000,
        database_url=str(tmp_path / "meetups.db"),
        project_name="Test Meetups",
    )


@pytest.fixture
def db(settings):
    database = Database(settings.database_url, max_connections=settings.max_connections)
    database.init_db()
    return database


@pytest.fixture
def service(db):
    return MeetupService(db)


@pytest.fixture
def add_meetups(service):
    """Create ``n`` meetups titled ``Meetup 1`` .. ``Meetup n``."""

    def _add(n):
        return [
            asyncio.run(service.create_meetup(MeetupCreate(title=f"Meetup {i}", body_text=f"Body {i}")))
            for i in range(1, n + 1)
        ]

    return _add


@pytest.fixture
def drop_table(db):
    """Remove the meetups table so that every query fails."""

    def _drop():
        conn = sqlite3.connect(db.path)
        try:
            conn.execute("DROP TABLE meetups")
            conn.commit()
        finally:
            conn.close()

    return _drop


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the startup handler, which applies migrations.
    with TestClient(app) as c:
        yield c
