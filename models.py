"""
Plain record types returned by the stores in db_stores.py.

Timestamps are RFC-3339 UTC strings, dates are YYYY-MM-DD strings.
Sensitive vault fields always hold plaintext here; ciphertext never leaves
the store.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional


class _Record:
    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Language(_Record):
    id: int
    name: str
    code: str
    flag_emoji: str
    created_at: str


@dataclass
class Vocabulary(_Record):
    id: int
    language_id: int
    word: str
    translation: str
    pronunciation: Optional[str]
    example_sentence: Optional[str]
    difficulty_level: int
    created_at: str


@dataclass
class Flashcard(_Record):
    id: int
    vocabulary_id: int
    ease_factor: float
    interval_days: int
    repetitions: int
    next_review: str
    last_reviewed: Optional[str]
    created_at: str


@dataclass
class TechSpace(_Record):
    id: int
    name: str
    description: Optional[str]
    icon: str
    created_at: str


@dataclass
class CodeSnippet(_Record):
    id: int
    tech_space_id: int
    title: str
    description: Optional[str]
    code: str
    language: str
    tags: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class Project(_Record):
    id: int
    name: str
    description: Optional[str]
    status: str
    priority: str
    start_date: Optional[str]
    end_date: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class Task(_Record):
    id: int
    project_id: int
    title: str
    description: Optional[str]
    status: str
    priority: str
    due_date: Optional[str]
    completed_at: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class Event(_Record):
    id: int
    title: str
    description: Optional[str]
    event_date: str
    start_time: Optional[str]
    end_time: Optional[str]
    event_type: str
    priority: str
    created_at: str
    updated_at: str


@dataclass
class Note(_Record):
    id: int
    title: str
    content: str
    note_date: str
    tags: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class PersonalAccount(_Record):
    id: int
    title: str
    email: str
    password: str
    website: Optional[str]
    notes: Optional[str]
    category: str  # email, social, banking, work, ...
    created_at: str
    updated_at: str


@dataclass
class PersonalInfo(_Record):
    id: int
    title: str
    content: str
    category: str  # identity, documents, contacts, ...
    is_sensitive: bool
    created_at: str
    updated_at: str
