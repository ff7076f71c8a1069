from __future__ import annotations

from fastapi.testclient import TestClient

from flashcard_relay.config import Settings
from flashcard_relay.main import create_app


def test_cors_origins_default_allows_all():
    settings = Settings(_env_file=None)

    assert settings.allowed_origins == ["*"]


def test_cors_origins_accepts_comma_separated_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings(_env_file=None)

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_single_plain_value_builds_app(monkeypatch, gateway):
    monkeypatch.setenv("CORS_ORIGINS", "https://example.com")
    client = TestClient(create_app(settings=Settings(_env_file=None), gateway=gateway))

    response = client.get("/api/health", headers={"Origin": "https://example.com"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://example.com"
