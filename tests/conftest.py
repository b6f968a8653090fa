"""
Test fixtures for Yotion.

Provides app, client, database and store fixtures backed by a file-based
SQLite database under tmp_path. Stores get a FrozenClock so due dates and
review timestamps are deterministic.
"""

from __future__ import annotations

import pytest
from datetime import datetime, timedelta, timezone

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FrozenClock:
    """Callable clock that only moves when a test tells it to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def app(tmp_path):
    """Create app with file-based SQLite for testing."""
    from app import create_app

    db_file = str(tmp_path / "test.db")
    app = create_app({
        "TESTING": True,
        "DATABASE": db_file,
        "SECRET_KEY": "test-secret-key",
        "OBFUSCATION_KEY": "B",
    })

    with app.app_context():
        yield app

    app.extensions["database"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def database(app):
    """The app's Database handle, for direct store tests."""
    from database import get_db
    return get_db()


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def obfuscator():
    from obfuscator import Obfuscator
    return Obfuscator(b"\x42")


@pytest.fixture
def language_store(database, clock):
    from db_stores import LanguageStoreDB
    return LanguageStoreDB(database, clock)


@pytest.fixture
def vocab_store(database, clock):
    from db_stores import VocabularyStoreDB
    return VocabularyStoreDB(database, clock)


@pytest.fixture
def tech_store(database, clock):
    from db_stores import TechNotesDB
    return TechNotesDB(database, clock)


@pytest.fixture
def project_store(database, clock):
    from db_stores import ProjectStoreDB
    return ProjectStoreDB(database, clock)


@pytest.fixture
def planner_store(database, clock):
    from db_stores import PlannerDB
    return PlannerDB(database, clock)


@pytest.fixture
def vault_store(database, obfuscator, clock):
    from db_stores import PersonalVaultDB
    return PersonalVaultDB(database, obfuscator, clock)


@pytest.fixture
def spanish(language_store):
    """A seeded language for vocabulary tests."""
    return language_store.create_language("Spanish", "es", "🇪🇸")
