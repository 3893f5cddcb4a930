from revelation_timeline.client.quran_client import QuranContentClient
from revelation_timeline.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("QURAN_CLIENT_ID", raising=False)
    monkeypatch.delenv("QURAN_CLIENT_SECRET", raising=False)

    settings = Settings(_env_file=None)

    assert settings.quran_client_id is None
    assert settings.quran_translation_id == 20
    assert settings.quran_token_safety_margin == 300
    assert settings.verses_per_page == 10
    assert settings.port == 4000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("QURAN_CLIENT_ID", "abc")
    monkeypatch.setenv("QURAN_CLIENT_SECRET", "xyz")
    monkeypatch.setenv("QURAN_HTTP_TIMEOUT", "")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')

    settings = Settings(_env_file=None)

    assert settings.quran_client_id == "abc"
    assert settings.quran_http_timeout is None
    assert settings.cors_origins == ["http://localhost:3000"]


def test_client_without_credentials_is_not_configured():
    client = QuranContentClient(client_id="", client_secret="")

    assert not client.is_configured
