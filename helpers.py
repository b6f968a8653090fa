"""
Shared helpers used across blueprints.

Request parsing that turns malformed JSON into ValidationError, and
accessors for the store objects bound to the running app.
"""

from __future__ import annotations

from typing import Any

from flask import current_app, request

from database import get_db
from db_stores import (
    LanguageStoreDB,
    PersonalVaultDB,
    PlannerDB,
    ProjectStoreDB,
    TechNotesDB,
    VocabularyStoreDB,
)
from errors import ValidationError


def json_body() -> dict[str, Any]:
    """Return the request's JSON object, or raise ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require(data: dict[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None:
        raise ValidationError(f"Missing field: {key}")
    return value


def require_int(data: dict[str, Any], key: str) -> int:
    value = require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Field {key} must be an integer")
    return value


def optional_bool(data: dict[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"Field {key} must be true or false")
    return value


def int_arg(name: str, default: int) -> int:
    """Positive integer query parameter, falling back to ``default``."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"Query parameter {name} must be an integer") from None
    if value < 1:
        raise ValidationError(f"Query parameter {name} must be positive")
    return value


def language_store() -> LanguageStoreDB:
    return LanguageStoreDB(get_db())


def vocabulary_store() -> VocabularyStoreDB:
    return VocabularyStoreDB(get_db())


def tech_notes_store() -> TechNotesDB:
    return TechNotesDB(get_db())


def project_store() -> ProjectStoreDB:
    return ProjectStoreDB(get_db())


def planner_store() -> PlannerDB:
    return PlannerDB(get_db())


def vault_store() -> PersonalVaultDB:
    return PersonalVaultDB(get_db(), current_app.extensions["obfuscator"])
