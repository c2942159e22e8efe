import pytest

from scripts.serve import build_parser
from settings import DEFAULT_PORT, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "RELOAD"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.PORT == DEFAULT_PORT == 8080
    assert settings.HOST == "0.0.0.0"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.RELOAD is False


def test_empty_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert Settings().PORT == 8080


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert Settings().PORT == 9090


@pytest.mark.parametrize("value", ["http", "0", "70000"])
def test_invalid_port(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValueError):
        Settings()


def test_reload_flag(monkeypatch):
    monkeypatch.setenv("RELOAD", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.RELOAD is True
    assert settings.LOG_LEVEL == "DEBUG"


def test_cli_defaults_follow_settings(monkeypatch):
    monkeypatch.setenv("PORT", "9191")
    args = build_parser(Settings()).parse_args([])
    assert args.port == 9191
    assert args.host == "0.0.0.0"
    assert args.reload is False


def test_cli_overrides_settings():
    args = build_parser(Settings()).parse_args(["--port", "7000", "--host", "127.0.0.1", "--reload"])
    assert args.port == 7000
    assert args.host == "127.0.0.1"
    assert args.reload is True
