"""
SQLite database layer for Yotion.

One persistent sqlite3 connection guarded by one lock. Every store operation
goes through Database.session() (reads) or Database.transaction() (writes),
which hold the lock for the whole operation and release it on every exit
path. sqlite3 errors are translated into the errors.py taxonomy here, so
nothing above this module ever sees a raw sqlite3 exception.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from flask import current_app

from errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


SCHEMA = """
-- Language learning
CREATE TABLE IF NOT EXISTS languages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    code TEXT NOT NULL UNIQUE,
    flag_emoji TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS vocabulary (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    language_id INTEGER NOT NULL REFERENCES languages(id) ON DELETE CASCADE,
    word TEXT NOT NULL,
    translation TEXT NOT NULL,
    pronunciation TEXT,
    example_sentence TEXT,
    difficulty_level INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_vocabulary_language_id ON vocabulary(language_id);

-- Spaced repetition, one card per vocabulary entry
CREATE TABLE IF NOT EXISTS flashcards (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    vocabulary_id INTEGER NOT NULL UNIQUE REFERENCES vocabulary(id) ON DELETE CASCADE,
    ease_factor REAL NOT NULL DEFAULT 2.5,
    interval_days INTEGER NOT NULL DEFAULT 1,
    repetitions INTEGER NOT NULL DEFAULT 0,
    next_review TEXT NOT NULL,
    last_reviewed TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_flashcards_next_review ON flashcards(next_review);

-- Tech notes
CREATE TABLE IF NOT EXISTS tech_spaces (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    description TEXT,
    icon TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS code_snippets (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    tech_space_id INTEGER NOT NULL REFERENCES tech_spaces(id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    description TEXT,
    code TEXT NOT NULL,
    language TEXT NOT NULL,
    tags TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_code_snippets_tech_space_id ON code_snippets(tech_space_id);

-- Projects
CREATE TABLE IF NOT EXISTS projects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'active',
    priority TEXT NOT NULL DEFAULT 'medium',
    start_date TEXT,
    end_date TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    project_id INTEGER NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'todo',
    priority TEXT NOT NULL DEFAULT 'medium',
    due_date TEXT,
    completed_at TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_tasks_project_id ON tasks(project_id);

-- Planner
CREATE TABLE IF NOT EXISTS events (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    event_date TEXT NOT NULL,
    start_time TEXT,
    end_time TEXT,
    event_type TEXT NOT NULL DEFAULT 'event',
    priority TEXT NOT NULL DEFAULT 'medium',
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_events_date ON events(event_date);

CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    note_date TEXT NOT NULL,
    tags TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_notes_date ON notes(note_date);

-- Personal vault (password and sensitive info content hold obscured text)
CREATE TABLE IF NOT EXISTS personal_accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    email TEXT NOT NULL,
    password TEXT NOT NULL,
    website TEXT,
    notes TEXT,
    category TEXT NOT NULL DEFAULT 'email',
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS personal_info (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    category TEXT NOT NULL DEFAULT 'general',
    is_sensitive INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def to_timestamp(moment: datetime) -> str:
    """RFC-3339 UTC with fixed microsecond width, so text order == time order."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def translate_error(err: sqlite3.Error) -> Exception:
    """Map a sqlite3 error onto the store's error taxonomy."""
    message = str(err)
    if isinstance(err, sqlite3.IntegrityError):
        if "UNIQUE" in message:
            return ValidationError("A record with this value already exists")
        if "FOREIGN KEY" in message:
            return NotFoundError("Referenced record")
    return StorageError("Database operation failed")


class Database:
    """Owns the single connection and the lock that serializes access to it."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        # Autocommit mode; transaction() issues BEGIN/COMMIT itself.
        self._conn = sqlite3.connect(self.path, check_same_thread=False, isolation_level=None)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys=ON")
        if self.path != ":memory:":
            self._conn.execute("PRAGMA journal_mode=WAL")
        self._lock = threading.Lock()

    @contextmanager
    def session(self) -> Iterator[sqlite3.Connection]:
        """Hold the lock for a read-only operation."""
        with self._lock:
            try:
                yield self._conn
            except sqlite3.Error as e:
                logger.error("Database read failed: %s", e)
                raise translate_error(e) from e

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Hold the lock and run the block as one all-or-nothing transaction."""
        with self._lock:
            try:
                self._conn.execute("BEGIN")
                yield self._conn
                self._conn.commit()
            except sqlite3.Error as e:
                self._rollback()
                logger.error("Database write failed, rolled back: %s", e)
                raise translate_error(e) from e
            except BaseException:
                self._rollback()
                raise

    def _rollback(self) -> None:
        # Runs while another error is already propagating; that error wins.
        try:
            self._conn.rollback()
        except sqlite3.Error as e:
            logger.error("Rollback failed: %s", e)

    def init_schema(self) -> None:
        """Execute schema DDL to create all tables."""
        with self._lock:
            self._conn.executescript(SCHEMA)

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def init_db(path: str | Path) -> Database:
    db = Database(path)
    db.init_schema()
    logger.info("Database ready at %s", path)
    return db


def get_db() -> Database:
    """Return the Database handle owned by the running app."""
    return current_app.extensions["database"]


def init_app(app) -> None:
    """Open the app's database once; it stays open for the process lifetime."""
    app.extensions["database"] = init_db(app.config["DATABASE"])
