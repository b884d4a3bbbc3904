from __future__ import annotations

import pytest
from pydantic import ValidationError

from zendesk_client.settings import Settings


def test_settings_load_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_EMAIL", "agent@example.com")
    monkeypatch.setenv("ZENDESK_API_TOKEN", "t")
    s = Settings()
    assert s.zendesk_email == "agent@example.com"
    assert s.zendesk_api_token == "t"
    assert s.http_timeout_seconds == 15.0
    assert s.base_url == "https://acme.zendesk.com/api/v2"


def test_base_url_override_wins(monkeypatch) -> None:
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_BASE_URL", "http://localhost:8080/api/v2/")
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "o")
    assert Settings().base_url == "http://localhost:8080/api/v2"


def test_settings_read_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "ZENDESK_SUBDOMAIN=acme\nZENDESK_OAUTH_TOKEN=o\nHTTP_TIMEOUT_SECONDS=3\n",
        encoding="utf-8",
    )
    s = Settings()
    assert s.zendesk_oauth_token == "o"
    assert s.http_timeout_seconds == 3.0


def test_settings_require_account(monkeypatch) -> None:
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "o")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_require_credentials(monkeypatch) -> None:
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_EMAIL", "agent@example.com")
    with pytest.raises(ValidationError):
        Settings()


def test_timeout_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_OAUTH_TOKEN", "o")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()
