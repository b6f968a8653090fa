"""Tests for validation.py input checks."""

from __future__ import annotations

import pytest

from errors import ValidationError
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


class TestStrings:
    def test_not_empty(self):
        validate_not_empty("x", "Field")
        for bad in ("", "   ", None):
            with pytest.raises(ValidationError, match="Field cannot be empty"):
                validate_not_empty(bad, "Field")

    def test_not_empty_rejects_non_text(self):
        with pytest.raises(ValidationError):
            validate_not_empty(12, "Field")

    def test_length_bounds(self):
        validate_string_length("a" * 50, "Name", 1, 50)
        with pytest.raises(ValidationError, match="at most 50"):
            validate_string_length("a" * 51, "Name", 1, 50)

    def test_length_ignores_surrounding_whitespace(self):
        validate_string_length("  " + "a" * 50 + "  ", "Name", 1, 50)

    def test_sanitize(self):
        assert sanitize_string("  hola ") == "hola"
        assert sanitize_optional_string(None) is None
        assert sanitize_optional_string(" x ") == "x"
        with pytest.raises(ValidationError):
            sanitize_string(3)


class TestFormats:
    def test_email(self):
        validate_email("me@example.com")
        for bad in ("me.example.com", "me@example", ""):
            with pytest.raises(ValidationError):
                validate_email(bad)

    @pytest.mark.parametrize("code", ["es", "en-US", "zh-TW", "fil"])
    def test_language_code_ok(self, code):
        validate_language_code(code)

    @pytest.mark.parametrize("code", ["e", "abcdef", "e1", "es_MX", ""])
    def test_language_code_bad(self, code):
        with pytest.raises(ValidationError):
            validate_language_code(code)

    def test_difficulty(self):
        for level in range(1, 6):
            validate_difficulty_level(level)
        for bad in (0, 6, True, "3", 2.5):
            with pytest.raises(ValidationError):
                validate_difficulty_level(bad)

    def test_dates(self):
        validate_date_format("2026-02-28")
        validate_date_format("")
        validate_date_format(None)
        for bad in ("2026-2-28", "28/02/2026", "2026-02-30", "2026-13-01"):
            with pytest.raises(ValidationError):
                validate_date_format(bad)


class TestEnums:
    def test_statuses(self):
        for s in PROJECT_STATUSES:
            validate_status(s, PROJECT_STATUSES)
        for s in TASK_STATUSES:
            validate_status(s, TASK_STATUSES)
        with pytest.raises(ValidationError, match="Allowed values"):
            validate_status("done", TASK_STATUSES)

    def test_priority(self):
        validate_priority("urgent")
        with pytest.raises(ValidationError):
            validate_priority("critical")
