"""Settings loading tests."""

from pathlib import Path

import pytest

from usuarios_api.core.config import BASE_DIR, Settings, load_settings

ENV_VARS = (
    "APP_NAME",
    "APP_ENV",
    "HOST",
    "PORT",
    "STATIC_DIR",
    "REQUEST_LOGGING",
    "LOG_LEVEL",
    "PRESERVE_GET_FALLTHROUGH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    settings = load_settings()

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.app_env == "development"
    assert settings.request_logging is True
    assert settings.preserve_get_fallthrough is False
    assert settings.static_path == BASE_DIR / "public"


def test_port_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "5000")

    assert load_settings().port == 5000


def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ValueError):
        load_settings()


def test_request_logging_defaults_off_outside_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    assert load_settings().request_logging is False

    monkeypatch.setenv("REQUEST_LOGGING", "1")
    assert load_settings().request_logging is True


def test_flags_and_names_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APP_NAME", "Mi API")
    monkeypatch.setenv("PRESERVE_GET_FALLTHROUGH", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path))

    settings = load_settings()

    assert settings.app_name == "Mi API"
    assert settings.preserve_get_fallthrough is True
    assert settings.log_level == "DEBUG"
    assert settings.static_path == tmp_path


def test_relative_static_dir_resolves_against_project_root() -> None:
    assert Settings(static_dir="assets").static_path == BASE_DIR / "assets"


def test_empty_port_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "")

    assert load_settings().port == 3000
