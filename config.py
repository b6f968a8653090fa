"""
Application configuration: environment-aware settings.

All environment variables are documented here. A .env file in the working
directory is loaded first, so local overrides do not need to be exported.
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = "dev-key-change-in-production"
DEFAULT_OBFUSCATION_KEY = "B"  # 0x42


def default_data_dir() -> Path:
    """Per-user data directory (XDG on Linux, ~/.local/share otherwise)."""
    base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / "yotion"


class BaseConfig:
    # Core Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", DEFAULT_SECRET_KEY)
    # Database: one SQLite file, opened once per process
    DATABASE = os.environ.get("DATABASE_PATH", str(default_data_dir() / "yotion.db"))

    # Key for the vault field obfuscation. Changing it makes existing
    # sensitive values unreadable ("Decryption failed").
    OBFUSCATION_KEY = os.environ.get("OBFUSCATION_KEY", DEFAULT_OBFUSCATION_KEY)

    # Result limits
    DUE_FLASHCARD_LIMIT = int(os.environ.get("DUE_FLASHCARD_LIMIT", "20"))
    SEARCH_LIMIT = int(os.environ.get("SEARCH_LIMIT", "50"))

    # Upload limits
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1 MB

    # Logging
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # "json" or "text"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")


class ProductionConfig(BaseConfig):
    DEBUG = False
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "json")

    @classmethod
    def validate(cls):
        """Fail fast on missing or insecure configuration in production."""
        errors: list[str] = []

        if cls.SECRET_KEY in (DEFAULT_SECRET_KEY, ""):
            errors.append("SECRET_KEY must be set to a secure value in production.")

        if not cls.OBFUSCATION_KEY:
            errors.append("OBFUSCATION_KEY must not be empty.")
        elif cls.OBFUSCATION_KEY == DEFAULT_OBFUSCATION_KEY:
            warnings.warn("OBFUSCATION_KEY is the built-in default; vault fields are only obscured.")

        if errors:
            raise RuntimeError(
                "Production configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )


class TestingConfig(BaseConfig):
    TESTING = True
    LOG_LEVEL = "WARNING"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
