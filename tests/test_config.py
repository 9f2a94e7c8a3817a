"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from notion_gateway.config import Settings


def test_notion_key_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("NOTION_KEY", "secret_from_env")
    settings = Settings(_env_file=None)
    assert settings.notion_key == "secret_from_env"
    assert settings.has_credential


def test_missing_notion_key(monkeypatch) -> None:
    monkeypatch.delenv("NOTION_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.notion_key is None
    assert not settings.has_credential


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("BACKEND_TIMEOUT", raising=False)
    monkeypatch.delenv("KEEPALIVE_INTERVAL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.notion_api_url == "https://api.notion.com/v1"
    assert settings.notion_version == "2022-06-28"
    assert settings.backend_timeout == 30.0
    assert settings.keepalive_interval == 10.0


def test_numeric_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BACKEND_TIMEOUT", "2.5")
    monkeypatch.setenv("KEEPALIVE_INTERVAL", "15")
    settings = Settings(_env_file=None)
    assert settings.backend_timeout == 2.5
    assert settings.keepalive_interval == 15.0


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(backend_timeout=0, _env_file=None)


@pytest.mark.parametrize("interval", [0, -1])
def test_keepalive_interval_must_be_positive(interval) -> None:
    with pytest.raises(ValidationError):
        Settings(keepalive_interval=interval, _env_file=None)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("*", ["*"]),
        (" * ", ["*"]),
        ("https://a.example.com", ["https://a.example.com"]),
        ("https://a.example.com, https://b.example.com,", ["https://a.example.com", "https://b.example.com"]),
    ],
)
def test_cors_origins_list(raw, expected) -> None:
    assert Settings(cors_allowed_origins=raw, _env_file=None).cors_origins_list == expected
