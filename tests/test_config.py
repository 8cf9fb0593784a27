"""Tests for environment configuration."""

import pytest

from app.config import DEFAULT_SAMPLE_AUTHORS_FILE, Config


class TestConfig:
    """Tests for Config class."""

    def test_mongodb_uri_default(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)
        assert Config.mongodb_uri() is None

    def test_mongodb_uri_blank_is_unset(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "")
        assert Config.mongodb_uri() is None

    def test_mongodb_uri_from_env(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
        assert Config.mongodb_uri() == "mongodb://localhost:27017"

    def test_mongodb_db_default(self, monkeypatch):
        monkeypatch.delenv("MONGODB_DB", raising=False)
        assert Config.mongodb_db() == "local_library"

    def test_authors_collection_default(self, monkeypatch):
        monkeypatch.delenv("MONGODB_AUTHORS_COLLECTION", raising=False)
        assert Config.authors_collection() == "authors"

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("MONGODB_TIMEOUT_MS", "250")
        assert Config.mongodb_timeout_ms() == 250

    def test_timeout_invalid(self, monkeypatch):
        monkeypatch.setenv("MONGODB_TIMEOUT_MS", "soon")
        with pytest.raises(ValueError, match="MONGODB_TIMEOUT_MS"):
            Config.mongodb_timeout_ms()

    def test_sample_authors_file_default(self, monkeypatch):
        monkeypatch.delenv("SAMPLE_AUTHORS_FILE", raising=False)
        assert Config.sample_authors_file() == DEFAULT_SAMPLE_AUTHORS_FILE

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Config.log_level() == "DEBUG"
