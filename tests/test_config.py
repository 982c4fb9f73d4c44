"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from sightline.config import MissingCredentialsError, Settings

ENV_VARS = [
    "TWITTER_BEARER_TOKEN", "GEOCODING_API_KEY", "SPREADSHEET_ID",
    "TWITTER_HANDLE", "LOG_LEVEL", "DATA_TYPES", "FOLLOWER_CAP",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the developer's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_settings() -> Settings:
    return Settings(_env_file=None)


def test_settings_loads_from_env(monkeypatch):
    """Settings should load credentials from environment variables."""
    monkeypatch.setenv("TWITTER_BEARER_TOKEN", "test_bearer_1234567890")
    monkeypatch.setenv("GEOCODING_API_KEY", "test_geo_key_1234567890")

    settings = make_settings()

    assert settings.twitter_bearer_token == "test_bearer_1234567890"
    assert settings.geocoding_api_key == "test_geo_key_1234567890"


def test_settings_has_defaults():
    """Settings should have sensible defaults for optional fields."""
    settings = make_settings()

    assert settings.log_level == "INFO"
    assert settings.cache_dir == "data"
    assert settings.output_dir == "output"
    assert settings.follower_cap == 5000
    assert settings.wordcloud_sample_size == 1000
    assert settings.wordcloud_seed == 1234
    assert settings.layout_seed == 42
    assert settings.data_types is None


def test_credentials_are_optional():
    """Either pipeline can be configured without the other's credentials."""
    settings = make_settings()

    assert settings.twitter_bearer_token is None
    assert settings.geocoding_api_key is None


def test_settings_validates_log_level(monkeypatch):
    """Settings should validate log level."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")

    with pytest.raises(ValidationError) as exc_info:
        make_settings()

    assert "log_level must be one of" in str(exc_info.value)


def test_settings_normalizes_log_level_case(monkeypatch):
    """Log level should be case-insensitive."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert make_settings().log_level == "DEBUG"


def test_settings_strips_handle_at(monkeypatch):
    """Handles may be configured with a leading @."""
    monkeypatch.setenv("TWITTER_HANDLE", "@someone")

    assert make_settings().twitter_handle == "someone"


def test_settings_rejects_short_token(monkeypatch):
    """Obviously truncated tokens are rejected."""
    monkeypatch.setenv("TWITTER_BEARER_TOKEN", "short")

    with pytest.raises(ValidationError):
        make_settings()


def test_follower_cap_bounded(monkeypatch):
    """The follower cap cannot exceed one API page."""
    monkeypatch.setenv("FOLLOWER_CAP", "6000")

    with pytest.raises(ValidationError):
        make_settings()


def test_data_types_from_json(monkeypatch):
    """A declared legend order is read as a JSON list."""
    monkeypatch.setenv("DATA_TYPES", '["Customer", "Financial"]')

    assert make_settings().data_types == ["Customer", "Financial"]


class TestRequire:
    """Tests for Settings.require."""

    def test_returns_configured_value(self, monkeypatch):
        monkeypatch.setenv("GEOCODING_API_KEY", "test_geo_key_1234567890")

        assert make_settings().require("geocoding_api_key") == "test_geo_key_1234567890"

    def test_missing_value_raises(self):
        """Missing credentials name the setting to configure."""
        with pytest.raises(MissingCredentialsError) as exc_info:
            make_settings().require("twitter_bearer_token")

        assert exc_info.value.field_name == "twitter_bearer_token"
        assert "TWITTER_BEARER_TOKEN" in str(exc_info.value)
