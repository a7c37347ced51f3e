import pytest

from wordsapi import API_BASE, MASHAPE_HOST, load_settings


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("WORDSAPI_KEY", " secret ")
    settings = load_settings(dotenv=False)
    assert settings.api_key == "secret"
    assert settings.api_base == API_BASE
    assert settings.mashape_host == MASHAPE_HOST
    assert settings.timeout is None


def test_load_settings_overrides(monkeypatch):
    monkeypatch.setenv("WORDSAPI_KEY", "secret")
    monkeypatch.setenv("WORDSAPI_BASE_URL", "http://localhost/words/")
    monkeypatch.setenv("WORDSAPI_HOST", "localhost")
    monkeypatch.setenv("WORDSAPI_TIMEOUT", "3")
    settings = load_settings(dotenv=False)
    client = settings.client()
    assert client.api_base == "http://localhost/words/"
    assert client.mashape_host == "localhost"
    assert client.timeout == 3.0


def test_load_settings_requires_key():
    with pytest.raises(ValueError, match="WORDSAPI_KEY"):
        load_settings(dotenv=False)


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_load_settings_rejects_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("WORDSAPI_KEY", "secret")
    monkeypatch.setenv("WORDSAPI_TIMEOUT", value)
    with pytest.raises(ValueError, match="WORDSAPI_TIMEOUT"):
        load_settings(dotenv=False)


def test_load_settings_reads_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("WORDSAPI_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings.api_key == "from-dotenv"
