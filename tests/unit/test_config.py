from pathlib import Path

import pytest
from pydantic import ValidationError

from helperkit.config import VIES_REST_URL, Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.default_country == "FR"
    assert settings.locale == "en"
    assert settings.http_timeout_seconds == 10.0
    assert settings.command_timeout_seconds == 60.0
    assert settings.recaptcha_secret is None
    assert settings.vies_url == VIES_REST_URL
    assert settings.data_dir.name == "helperkit"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HELPERKIT_DEFAULT_COUNTRY", "BE")
    monkeypatch.setenv("HELPERKIT_DATA_DIR", str(tmp_path / "db"))
    monkeypatch.setenv("helperkit_recaptcha_secret", "s3cret")

    settings = Settings()

    assert settings.default_country == "BE"
    assert settings.data_dir == Path(tmp_path / "db")
    assert settings.recaptcha_secret == "s3cret"


def test_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("HELPERKIT_LOCALE=fr\n", encoding="utf-8")
    assert Settings().locale == "fr"


@pytest.mark.parametrize(
    "overrides",
    [{"http_timeout_seconds": 0}, {"default_country": "FRA"}, {"vies_url": "x"}],
)
def test_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_get_settings_is_cached(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    first = get_settings()
    monkeypatch.setenv("HELPERKIT_DEFAULT_COUNTRY", "DE")
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().default_country == "DE"
