"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from config import Settings, get_app_config

CREDS = '{"type":"service_account","project_id":"test"}'


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        """Test optional settings fall back to defaults."""
        settings = Settings(firebase_credentials=CREDS, _env_file=None)

        assert settings.firestore_messages_collection == "messages"
        assert settings.firestore_query_timeout == 8.0
        assert settings.log_level == "INFO"

    def test_credentials_required(self, monkeypatch):
        """Test startup fails without credentials."""
        monkeypatch.delenv("FIREBASE_CREDENTIALS", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_credentials_rejected(self):
        """Test whitespace-only credentials are rejected."""
        with pytest.raises(ValidationError):
            Settings(firebase_credentials="   ", _env_file=None)

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        settings = Settings(
            firebase_credentials=CREDS, log_level="debug", _env_file=None
        )
        assert settings.log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(firebase_credentials=CREDS, log_level="chatty", _env_file=None)

    def test_timeout_must_be_positive(self):
        """Test non-positive query timeouts are rejected."""
        with pytest.raises(ValidationError):
            Settings(
                firebase_credentials=CREDS,
                firestore_query_timeout=0,
                _env_file=None,
            )


def test_app_config_is_a_copy():
    """Test callers cannot mutate the shared app config."""
    get_app_config()["title"] = "changed"

    assert get_app_config()["title"] == "Chat History API"
