"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError
from conn_uri.config import Settings


def test_default_uri_defaults_to_localhost(monkeypatch):
    """Without configuration the default URI is http://localhost:9200/."""
    monkeypatch.delenv("DEFAULT_URI", raising=False)
    uri = Settings().default_uri()
    assert uri.scheme == "http"
    assert uri.host == "localhost"
    assert uri.port == 9200
    assert uri.raw_path == "/"


def test_default_uri_from_environment(monkeypatch):
    """DEFAULT_URI is read from the environment."""
    monkeypatch.setenv("DEFAULT_URI", "https://es.example.com:9243/base?timeout=30")
    uri = Settings().default_uri()
    assert uri.scheme == "https"
    assert uri.port == 9243
    assert uri.raw_query == "timeout=30"


@pytest.mark.parametrize("value", ["not a uri", "localhost", "/path/only"])
def test_invalid_default_uri_rejected(monkeypatch, value):
    """DEFAULT_URI must parse and carry a scheme and a host."""
    monkeypatch.setenv("DEFAULT_URI", value)
    with pytest.raises(ValidationError):
        Settings()


def test_log_settings_from_environment(monkeypatch):
    """Logging options are configurable."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DEBUG", "true")
    settings = Settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DEBUG is True
