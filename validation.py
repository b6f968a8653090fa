"""
Input checks and sanitizing for values entering the record store.

Every check raises ValidationError with a message safe to show the user.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from errors import ValidationError

PRIORITIES = ("low", "medium", "high", "urgent")
PROJECT_STATUSES = ("active", "completed", "on_hold", "cancelled")
TASK_STATUSES = ("todo", "in_progress", "completed", "blocked")

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LANGUAGE_CODE_RE = re.compile(r"^[A-Za-z-]+$")


def validate_not_empty(value: str | None, field: str) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field} must be text")
    if value is None or not value.strip():
        raise ValidationError(f"{field} cannot be empty")


def validate_string_length(value: str, field: str, min_len: int, max_len: int) -> None:
    length = len(value.strip())
    if length < min_len:
        raise ValidationError(f"{field} must be at least {min_len} characters")
    if length > max_len:
        raise ValidationError(f"{field} must be at most {max_len} characters")


def validate_email(email: str) -> None:
    validate_not_empty(email, "Email")
    if "@" not in email or "." not in email:
        raise ValidationError("Invalid email format")


def validate_language_code(code: str) -> None:
    validate_not_empty(code, "Language code")
    code = code.strip()
    if not 2 <= len(code) <= 5:
        raise ValidationError("Language code must be between 2 and 5 characters")
    if not _LANGUAGE_CODE_RE.match(code):
        raise ValidationError("Language code must contain only letters and hyphens")


def validate_difficulty_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 5:
        raise ValidationError("Difficulty level must be between 1 and 5")


def validate_status(status: str, allowed: tuple[str, ...]) -> None:
    if status not in allowed:
        raise ValidationError(f"Invalid status. Allowed values: {', '.join(allowed)}")


def validate_priority(priority: str) -> None:
    if priority not in PRIORITIES:
        raise ValidationError(f"Invalid priority. Allowed values: {', '.join(PRIORITIES)}")


def validate_date_format(value: str | None) -> None:
    """Accept empty/None (optional dates) or a real YYYY-MM-DD calendar date."""
    if not value:
        return
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError("Date must be in YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


def sanitize_string(value: str) -> str:
    if not isinstance(value, str):
        raise ValidationError("Expected a text value")
    return value.strip()


def sanitize_optional_string(value: Optional[str]) -> Optional[str]:
    return sanitize_string(value) if value is not None else None
