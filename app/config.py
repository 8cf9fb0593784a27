# app/config.py
import os
from pathlib import Path
from typing import Optional


DEFAULT_SAMPLE_AUTHORS_FILE = Path(__file__).resolve().parent / "data" / "sample_authors.json"


class Config:
    """Environment-backed settings, read on every call."""

    @staticmethod
    def mongodb_uri() -> Optional[str]:
        # Unset or blank means "use the bundled sample data".
        return os.environ.get("MONGODB_URI") or None

    @staticmethod
    def mongodb_db() -> str:
        return os.environ.get("MONGODB_DB", "local_library")

    @staticmethod
    def authors_collection() -> str:
        return os.environ.get("MONGODB_AUTHORS_COLLECTION", "authors")

    @staticmethod
    def mongodb_timeout_ms() -> int:
        raw = os.environ.get("MONGODB_TIMEOUT_MS", "5000")
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"MONGODB_TIMEOUT_MS must be an integer, got {raw!r}") from None

    @staticmethod
    def sample_authors_file() -> Path:
        return Path(os.environ.get("SAMPLE_AUTHORS_FILE", str(DEFAULT_SAMPLE_AUTHORS_FILE)))

    @staticmethod
    def log_level() -> str:
        return os.environ.get("LOG_LEVEL", "INFO").upper()
