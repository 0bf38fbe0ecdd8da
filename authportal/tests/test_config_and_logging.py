from __future__ import annotations

import pytest

from authportal.shared.config.settings import AppConfig, SecurityConfig, SessionConfig
from authportal.shared.logging import sanitize_message


def test_session_defaults_match_one_hour_cookie(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SESSION_TTL", raising=False)
    monkeypatch.delenv("SESSION_COOKIE_NAME", raising=False)

    config = SessionConfig()

    assert config.ttl_seconds == 3600
    assert config.cookie_name == "sid"


def test_security_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("COOKIE_SECURE", "yes")

    config = SecurityConfig()

    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.cookie_secure is True


def test_production_warns_about_insecure_cookies(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("COOKIE_SECURE", "false")

    config = AppConfig()

    assert config.is_production()
    assert "Cookie Secure flag is DISABLED" in capsys.readouterr().err


def test_sanitize_message_masks_credentials() -> None:
    message = sanitize_message("login email=alice@example.com password=hunter22")

    assert "alice@" not in message
    assert "hunter22" not in message
    assert "***@example.com" in message
