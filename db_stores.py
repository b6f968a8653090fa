"""
DB-backed store classes for Yotion.

Each store is constructed with the Database handle (and, for the vault, the
Obfuscator) it works against. Inputs are validated and sanitized before the
lock is taken; every read or write then runs inside a single
Database.session() / Database.transaction() block.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Optional

from database import Database, to_timestamp, utc_now
from errors import DecodeError, NotFoundError
from models import (
    CodeSnippet,
    Event,
    Flashcard,
    Language,
    Note,
    PersonalAccount,
    PersonalInfo,
    Project,
    Task,
    TechSpace,
    Vocabulary,
)
from obfuscator import Obfuscator
from scheduler import (
    INITIAL_EASE_FACTOR,
    INITIAL_INTERVAL_DAYS,
    RepetitionState,
    schedule,
)
from validation import (
    PROJECT_STATUSES,
    TASK_STATUSES,
    sanitize_optional_string,
    sanitize_string,
    validate_date_format,
    validate_difficulty_level,
    validate_email,
    validate_language_code,
    validate_not_empty,
    validate_priority,
    validate_status,
    validate_string_length,
)

logger = logging.getLogger(__name__)

DECRYPTION_FAILED = "Decryption failed"
DEFAULT_DUE_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 50


class _StoreDB:
    def __init__(self, db: Database, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self.clock = clock

    def _now(self) -> str:
        return to_timestamp(self.clock())


# ── Languages ────────────────────────────────────────────────────────


class LanguageStoreDB(_StoreDB):
    """Languages own vocabulary; deleting one cascades to its cards."""

    def create_language(self, name: str, code: str, flag_emoji: str) -> Language:
        validate_not_empty(name, "Language name")
        validate_string_length(name, "Language name", 1, 50)
        validate_language_code(code)
        validate_not_empty(flag_emoji, "Flag emoji")

        name, code, flag_emoji = sanitize_string(name), sanitize_string(code), sanitize_string(flag_emoji)
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO languages (name, code, flag_emoji, created_at) VALUES (?, ?, ?, ?)",
                (name, code, flag_emoji, now),
            )
        logger.info("Created language %s (%s)", name, code)
        return Language(id=cur.lastrowid, name=name, code=code, flag_emoji=flag_emoji, created_at=now)

    def get_languages(self) -> list[Language]:
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT id, name, code, flag_emoji, created_at FROM languages ORDER BY name"
            ).fetchall()
        return [Language(**dict(r)) for r in rows]

    def delete_language(self, language_id: int) -> None:
        with self.db.transaction() as conn:
            cur = conn.execute("DELETE FROM languages WHERE id=?", (language_id,))
            if cur.rowcount == 0:
                raise NotFoundError("Language")
        logger.info("Deleted language %s", language_id)


# ── Vocabulary + Flashcards (SM-2) ───────────────────────────────────


_VOCAB_COLUMNS = (
    "id, language_id, word, translation, pronunciation, example_sentence, "
    "difficulty_level, created_at"
)
_FLASHCARD_COLUMNS = (
    "id, vocabulary_id, ease_factor, interval_days, repetitions, "
    "next_review, last_reviewed, created_at"
)


class VocabularyStoreDB(_StoreDB):
    """Vocabulary entries and the flashcard each one owns."""

    def create_vocabulary(self, language_id: int, word: str, translation: str,
                          pronunciation: Optional[str] = None,
                          example_sentence: Optional[str] = None,
                          difficulty_level: int = 1) -> Vocabulary:
        """Insert a vocabulary entry together with its fresh flashcard.

        Both rows are written in one transaction: if the flashcard insert
        fails the vocabulary row is rolled back too.
        """
        validate_not_empty(word, "Word")
        validate_string_length(word, "Word", 1, 200)
        validate_not_empty(translation, "Translation")
        validate_string_length(translation, "Translation", 1, 500)
        validate_difficulty_level(difficulty_level)

        word = sanitize_string(word)
        translation = sanitize_string(translation)
        pronunciation = sanitize_optional_string(pronunciation)
        example_sentence = sanitize_optional_string(example_sentence)

        moment = self.clock()
        now = to_timestamp(moment)
        first_review = to_timestamp(moment + timedelta(days=INITIAL_INTERVAL_DAYS))

        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO vocabulary (language_id, word, translation, pronunciation, "
                "example_sentence, difficulty_level, created_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (language_id, word, translation, pronunciation, example_sentence,
                 difficulty_level, now),
            )
            vocab_id = cur.lastrowid
            conn.execute(
                "INSERT INTO flashcards (vocabulary_id, ease_factor, interval_days, repetitions, "
                "next_review, last_reviewed, created_at) VALUES (?, ?, ?, 0, ?, NULL, ?)",
                (vocab_id, INITIAL_EASE_FACTOR, INITIAL_INTERVAL_DAYS, first_review, now),
            )

        logger.info("Created vocabulary %s with flashcard (language=%s)", vocab_id, language_id)
        return Vocabulary(
            id=vocab_id,
            language_id=language_id,
            word=word,
            translation=translation,
            pronunciation=pronunciation,
            example_sentence=example_sentence,
            difficulty_level=difficulty_level,
            created_at=now,
        )

    def get_vocabulary_by_language(self, language_id: int) -> list[Vocabulary]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_VOCAB_COLUMNS} FROM vocabulary WHERE language_id=? ORDER BY word",
                (language_id,),
            ).fetchall()
        return [Vocabulary(**dict(r)) for r in rows]

    def search_vocabulary(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[Vocabulary]:
        pattern = f"%{query.strip()}%"
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_VOCAB_COLUMNS} FROM vocabulary "
                "WHERE word LIKE ? OR translation LIKE ? OR example_sentence LIKE ? "
                "ORDER BY word LIMIT ?",
                (pattern, pattern, pattern, limit),
            ).fetchall()
        return [Vocabulary(**dict(r)) for r in rows]

    def get_flashcard(self, flashcard_id: int) -> Flashcard:
        with self.db.session() as conn:
            row = conn.execute(
                f"SELECT {_FLASHCARD_COLUMNS} FROM flashcards WHERE id=?", (flashcard_id,)
            ).fetchone()
        if row is None:
            raise NotFoundError("Flashcard")
        return Flashcard(**dict(row))

    def get_flashcard_for_vocabulary(self, vocabulary_id: int) -> Flashcard:
        with self.db.session() as conn:
            row = conn.execute(
                f"SELECT {_FLASHCARD_COLUMNS} FROM flashcards WHERE vocabulary_id=?",
                (vocabulary_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError("Flashcard")
        return Flashcard(**dict(row))

    def get_due_flashcards(self, limit: int = DEFAULT_DUE_LIMIT) -> list[tuple[Flashcard, Vocabulary]]:
        """Cards with next_review <= now, most overdue first."""
        now = self._now()
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT f.id AS f_id, f.vocabulary_id, f.ease_factor, f.interval_days, "
                "f.repetitions, f.next_review, f.last_reviewed, f.created_at AS f_created_at, "
                "v.language_id, v.word, v.translation, v.pronunciation, v.example_sentence, "
                "v.difficulty_level, v.created_at AS v_created_at "
                "FROM flashcards f JOIN vocabulary v ON f.vocabulary_id = v.id "
                "WHERE f.next_review <= ? ORDER BY f.next_review ASC LIMIT ?",
                (now, limit),
            ).fetchall()
        return [(self._row_to_flashcard(r), self._row_to_vocabulary(r)) for r in rows]

    def due_count(self) -> int:
        with self.db.session() as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS cnt FROM flashcards WHERE next_review <= ?", (self._now(),)
            ).fetchone()
        return row["cnt"] if row else 0

    def review_flashcard(self, flashcard_id: int, quality: int) -> None:
        """Record one review. Quality is clamped to 0..5, never rejected.

        The read, the schedule computation and the write all happen under
        the connection lock, so two reviews of the same card cannot both
        start from the same state.
        """
        moment = self.clock()
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT ease_factor, interval_days, repetitions FROM flashcards WHERE id=?",
                (flashcard_id,),
            ).fetchone()
            if row is None:
                raise NotFoundError("Flashcard")
            outcome = schedule(
                RepetitionState(row["ease_factor"], row["interval_days"], row["repetitions"]),
                quality,
                moment,
            )
            conn.execute(
                "UPDATE flashcards SET ease_factor=?, interval_days=?, repetitions=?, "
                "next_review=?, last_reviewed=? WHERE id=?",
                (outcome.ease_factor, outcome.interval_days, outcome.repetitions,
                 to_timestamp(outcome.next_review), to_timestamp(outcome.last_reviewed),
                 flashcard_id),
            )
        logger.debug(
            "Reviewed flashcard %s quality=%s -> interval=%sd reps=%s ease=%.2f",
            flashcard_id, quality, outcome.interval_days, outcome.repetitions, outcome.ease_factor,
        )

    @staticmethod
    def _row_to_flashcard(r) -> Flashcard:
        return Flashcard(
            id=r["f_id"], vocabulary_id=r["vocabulary_id"], ease_factor=r["ease_factor"],
            interval_days=r["interval_days"], repetitions=r["repetitions"],
            next_review=r["next_review"], last_reviewed=r["last_reviewed"],
            created_at=r["f_created_at"],
        )

    @staticmethod
    def _row_to_vocabulary(r) -> Vocabulary:
        return Vocabulary(
            id=r["vocabulary_id"], language_id=r["language_id"], word=r["word"],
            translation=r["translation"], pronunciation=r["pronunciation"],
            example_sentence=r["example_sentence"], difficulty_level=r["difficulty_level"],
            created_at=r["v_created_at"],
        )


# ── Tech Notes ───────────────────────────────────────────────────────


_SNIPPET_COLUMNS = (
    "id, tech_space_id, title, description, code, language, tags, created_at, updated_at"
)


class TechNotesDB(_StoreDB):
    """Tech spaces and the code snippets filed under them."""

    def create_tech_space(self, name: str, icon: str, description: Optional[str] = None) -> TechSpace:
        validate_not_empty(name, "Tech space name")
        validate_string_length(name, "Tech space name", 1, 100)
        validate_not_empty(icon, "Icon")

        name, icon = sanitize_string(name), sanitize_string(icon)
        description = sanitize_optional_string(description)
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO tech_spaces (name, description, icon, created_at) VALUES (?, ?, ?, ?)",
                (name, description, icon, now),
            )
        logger.info("Created tech space %s", name)
        return TechSpace(id=cur.lastrowid, name=name, description=description, icon=icon, created_at=now)

    def get_tech_spaces(self) -> list[TechSpace]:
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT id, name, description, icon, created_at FROM tech_spaces "
                "ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [TechSpace(**dict(r)) for r in rows]

    def delete_tech_space(self, tech_space_id: int) -> None:
        with self.db.transaction() as conn:
            cur = conn.execute("DELETE FROM tech_spaces WHERE id=?", (tech_space_id,))
            if cur.rowcount == 0:
                raise NotFoundError("Tech space")
        logger.info("Deleted tech space %s", tech_space_id)

    def create_code_snippet(self, tech_space_id: int, title: str, code: str, language: str,
                            description: Optional[str] = None,
                            tags: Optional[str] = None) -> CodeSnippet:
        validate_not_empty(title, "Title")
        validate_string_length(title, "Title", 1, 200)
        validate_not_empty(code, "Code")
        validate_not_empty(language, "Language")

        title, language = sanitize_string(title), sanitize_string(language)
        description, tags = sanitize_optional_string(description), sanitize_optional_string(tags)
        now = self._now()
        # Code keeps its whitespace; indentation matters.
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO code_snippets (tech_space_id, title, description, code, language, "
                "tags, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (tech_space_id, title, description, code, language, tags, now, now),
            )
        return CodeSnippet(
            id=cur.lastrowid, tech_space_id=tech_space_id, title=title, description=description,
            code=code, language=language, tags=tags, created_at=now, updated_at=now,
        )

    def get_code_snippets_by_tech_space(self, tech_space_id: int) -> list[CodeSnippet]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_SNIPPET_COLUMNS} FROM code_snippets WHERE tech_space_id=? "
                "ORDER BY updated_at DESC, id DESC",
                (tech_space_id,),
            ).fetchall()
        return [CodeSnippet(**dict(r)) for r in rows]

    def search_code_snippets(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[CodeSnippet]:
        pattern = f"%{query.strip()}%"
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_SNIPPET_COLUMNS} FROM code_snippets "
                "WHERE title LIKE ? OR description LIKE ? OR code LIKE ? OR tags LIKE ? "
                "ORDER BY updated_at DESC, id DESC LIMIT ?",
                (pattern, pattern, pattern, pattern, limit),
            ).fetchall()
        return [CodeSnippet(**dict(r)) for r in rows]


# ── Projects + Tasks ─────────────────────────────────────────────────


_TASK_COLUMNS = (
    "id, project_id, title, description, status, priority, due_date, completed_at, "
    "created_at, updated_at"
)


class ProjectStoreDB(_StoreDB):

    def create_project(self, name: str, status: str = "active", priority: str = "medium",
                       description: Optional[str] = None, start_date: Optional[str] = None,
                       end_date: Optional[str] = None) -> Project:
        validate_not_empty(name, "Project name")
        validate_string_length(name, "Project name", 1, 200)
        validate_status(status, PROJECT_STATUSES)
        validate_priority(priority)
        validate_date_format(start_date)
        validate_date_format(end_date)

        name = sanitize_string(name)
        description = sanitize_optional_string(description)
        start_date, end_date = start_date or None, end_date or None
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO projects (name, description, status, priority, start_date, end_date, "
                "created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (name, description, status, priority, start_date, end_date, now, now),
            )
        logger.info("Created project %s", name)
        return Project(
            id=cur.lastrowid, name=name, description=description, status=status,
            priority=priority, start_date=start_date, end_date=end_date,
            created_at=now, updated_at=now,
        )

    def get_projects(self) -> list[Project]:
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT id, name, description, status, priority, start_date, end_date, "
                "created_at, updated_at FROM projects ORDER BY updated_at DESC, id DESC"
            ).fetchall()
        return [Project(**dict(r)) for r in rows]

    def delete_project(self, project_id: int) -> None:
        with self.db.transaction() as conn:
            cur = conn.execute("DELETE FROM projects WHERE id=?", (project_id,))
            if cur.rowcount == 0:
                raise NotFoundError("Project")
        logger.info("Deleted project %s", project_id)

    def create_task(self, project_id: int, title: str, status: str = "todo",
                    priority: str = "medium", description: Optional[str] = None,
                    due_date: Optional[str] = None) -> Task:
        validate_not_empty(title, "Task title")
        validate_string_length(title, "Task title", 1, 200)
        validate_status(status, TASK_STATUSES)
        validate_priority(priority)
        validate_date_format(due_date)

        title = sanitize_string(title)
        description = sanitize_optional_string(description)
        due_date = due_date or None
        now = self._now()
        completed_at = now if status == "completed" else None
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO tasks (project_id, title, description, status, priority, due_date, "
                "completed_at, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (project_id, title, description, status, priority, due_date, completed_at, now, now),
            )
        return Task(
            id=cur.lastrowid, project_id=project_id, title=title, description=description,
            status=status, priority=priority, due_date=due_date, completed_at=completed_at,
            created_at=now, updated_at=now,
        )

    def get_tasks_by_project(self, project_id: int) -> list[Task]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_TASK_COLUMNS} FROM tasks WHERE project_id=? ORDER BY created_at, id",
                (project_id,),
            ).fetchall()
        return [Task(**dict(r)) for r in rows]

    def update_task_status(self, task_id: int, status: str) -> None:
        validate_status(status, TASK_STATUSES)
        now = self._now()
        completed_at = now if status == "completed" else None
        with self.db.transaction() as conn:
            cur = conn.execute(
                "UPDATE tasks SET status=?, completed_at=?, updated_at=? WHERE id=?",
                (status, completed_at, now, task_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError("Task")


# ── Planner (events + daily notes) ───────────────────────────────────


class PlannerDB(_StoreDB):

    def create_event(self, title: str, event_date: str, event_type: str = "event",
                     priority: str = "medium", description: Optional[str] = None,
                     start_time: Optional[str] = None, end_time: Optional[str] = None) -> Event:
        validate_not_empty(title, "Event title")
        validate_string_length(title, "Event title", 1, 200)
        validate_not_empty(event_date, "Event date")
        validate_date_format(event_date)
        validate_priority(priority)

        title, event_type = sanitize_string(title), sanitize_string(event_type)
        description = sanitize_optional_string(description)
        start_time, end_time = sanitize_optional_string(start_time), sanitize_optional_string(end_time)
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO events (title, description, event_date, start_time, end_time, "
                "event_type, priority, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (title, description, event_date, start_time, end_time, event_type, priority, now, now),
            )
        return Event(
            id=cur.lastrowid, title=title, description=description, event_date=event_date,
            start_time=start_time, end_time=end_time, event_type=event_type, priority=priority,
            created_at=now, updated_at=now,
        )

    def get_events_by_date(self, event_date: str) -> list[Event]:
        validate_not_empty(event_date, "Date")
        validate_date_format(event_date)
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT id, title, description, event_date, start_time, end_time, event_type, "
                "priority, created_at, updated_at FROM events WHERE event_date=? "
                "ORDER BY start_time ASC, id ASC",
                (event_date,),
            ).fetchall()
        return [Event(**dict(r)) for r in rows]

    def create_note(self, title: str, content: str, note_date: str,
                    tags: Optional[str] = None) -> Note:
        validate_not_empty(title, "Note title")
        validate_string_length(title, "Note title", 1, 200)
        validate_not_empty(content, "Note content")
        validate_not_empty(note_date, "Note date")
        validate_date_format(note_date)

        title, tags = sanitize_string(title), sanitize_optional_string(tags)
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO notes (title, content, note_date, tags, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (title, content, note_date, tags, now, now),
            )
        return Note(
            id=cur.lastrowid, title=title, content=content, note_date=note_date, tags=tags,
            created_at=now, updated_at=now,
        )

    def get_notes_by_date(self, note_date: str) -> list[Note]:
        validate_not_empty(note_date, "Date")
        validate_date_format(note_date)
        with self.db.session() as conn:
            rows = conn.execute(
                "SELECT id, title, content, note_date, tags, created_at, updated_at FROM notes "
                "WHERE note_date=? ORDER BY created_at DESC, id DESC",
                (note_date,),
            ).fetchall()
        return [Note(**dict(r)) for r in rows]


# ── Personal Vault ───────────────────────────────────────────────────


_ACCOUNT_COLUMNS = (
    "id, title, email, password, website, notes, category, created_at, updated_at"
)
_INFO_COLUMNS = "id, title, content, category, is_sensitive, created_at, updated_at"


class PersonalVaultDB(_StoreDB):
    """Accounts and personal info. Sensitive fields are obscured at rest.

    Account passwords are always sensitive; info content is
    sensitive when the entry's is_sensitive flag is set. Values that fail
    to decode come back as DECRYPTION_FAILED so one corrupt row does not
    break a listing.
    """

    def __init__(self, db: Database, obfuscator: Obfuscator,
                 clock: Callable[[], datetime] = utc_now):
        super().__init__(db, clock)
        self.obfuscator = obfuscator

    def _reveal(self, stored: str, table: str, record_id: int) -> str:
        try:
            return self.obfuscator.reveal(stored)
        except DecodeError as e:
            logger.warning("Could not decode %s row %s: %s", table, record_id, e)
            return DECRYPTION_FAILED

    def create_personal_account(self, title: str, email: str, password: str,
                                category: str = "email", website: Optional[str] = None,
                                notes: Optional[str] = None) -> PersonalAccount:
        validate_not_empty(title, "Account title")
        validate_string_length(title, "Account title", 1, 200)
        validate_email(email)
        validate_not_empty(password, "Password")

        title, email = sanitize_string(title), sanitize_string(email)
        category = sanitize_string(category)
        website, notes = sanitize_optional_string(website), sanitize_optional_string(notes)
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO personal_accounts (title, email, password, website, notes, category, "
                "created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (title, email, self.obfuscator.obscure(password),
                 website, notes, category, now, now),
            )
        logger.info("Created personal account %s", cur.lastrowid)
        return PersonalAccount(
            id=cur.lastrowid, title=title, email=email, password=password, website=website,
            notes=notes, category=category, created_at=now, updated_at=now,
        )

    def get_personal_accounts(self) -> list[PersonalAccount]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_ACCOUNT_COLUMNS} FROM personal_accounts ORDER BY category, title"
            ).fetchall()
        return [self._row_to_account(r) for r in rows]

    def get_personal_accounts_by_category(self, category: str) -> list[PersonalAccount]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_ACCOUNT_COLUMNS} FROM personal_accounts WHERE category=? ORDER BY title",
                (category,),
            ).fetchall()
        return [self._row_to_account(r) for r in rows]

    def create_personal_info(self, title: str, content: str, category: str = "general",
                             is_sensitive: bool = False) -> PersonalInfo:
        validate_not_empty(title, "Info title")
        validate_string_length(title, "Info title", 1, 200)
        validate_not_empty(content, "Content")

        title, category = sanitize_string(title), sanitize_string(category)
        is_sensitive = bool(is_sensitive)
        stored = self.obfuscator.obscure(content) if is_sensitive else content
        now = self._now()
        with self.db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO personal_info (title, content, category, is_sensitive, created_at, "
                "updated_at) VALUES (?, ?, ?, ?, ?, ?)",
                (title, stored, category, int(is_sensitive), now, now),
            )
        logger.info("Created personal info %s (sensitive=%s)", cur.lastrowid, is_sensitive)
        return PersonalInfo(
            id=cur.lastrowid, title=title, content=content, category=category,
            is_sensitive=is_sensitive, created_at=now, updated_at=now,
        )

    def get_personal_info(self) -> list[PersonalInfo]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_INFO_COLUMNS} FROM personal_info ORDER BY category, title"
            ).fetchall()
        return [self._row_to_info(r) for r in rows]

    def get_personal_info_by_category(self, category: str) -> list[PersonalInfo]:
        with self.db.session() as conn:
            rows = conn.execute(
                f"SELECT {_INFO_COLUMNS} FROM personal_info WHERE category=? ORDER BY title",
                (category,),
            ).fetchall()
        return [self._row_to_info(r) for r in rows]

    def _row_to_account(self, r) -> PersonalAccount:
        return PersonalAccount(
            id=r["id"], title=r["title"],
            email=r["email"],
            password=self._reveal(r["password"], "personal_accounts", r["id"]),
            website=r["website"], notes=r["notes"], category=r["category"],
            created_at=r["created_at"], updated_at=r["updated_at"],
        )

    def _row_to_info(self, r) -> PersonalInfo:
        is_sensitive = bool(r["is_sensitive"])
        content = r["content"]
        if is_sensitive:
            content = self._reveal(content, "personal_info", r["id"])
        return PersonalInfo(
            id=r["id"], title=r["title"], content=content, category=r["category"],
            is_sensitive=is_sensitive, created_at=r["created_at"], updated_at=r["updated_at"],
        )
