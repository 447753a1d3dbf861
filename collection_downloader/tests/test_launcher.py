"""Tests for the environment parsing used by index.py."""

import pytest

import index
from collection_downloader import config


def test_parse_bool_accepts_known_spellings():
    for raw, expected in [("true", True), (" YES ", True), ("1", True), ("off", False), ("0", False)]:
        assert config.parse_bool("DEV", raw) is expected


@pytest.mark.parametrize("raw", ["", "   ", "maybe"])
def test_parse_bool_rejects_other_values(raw):
    with pytest.raises(RuntimeError, match="DEV"):
        config.parse_bool("DEV", raw)


def test_require_env_raises_when_missing(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    with pytest.raises(RuntimeError, match="PORT"):
        config.require_env("PORT")


def test_launcher_settings_need_port_and_dev(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("DEV", "on")
    assert index.launcher_settings() == (9001, True)

    monkeypatch.delenv("DEV")
    with pytest.raises(RuntimeError, match="DEV"):
        index.launcher_settings()


def test_build_command_adds_reload_only_in_dev(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")

    assert index.build_command(9000, False) == [
        "uvicorn",
        "collection_downloader.server:app",
        "--host",
        "127.0.0.1",
        "--port",
        "9000",
    ]
    assert "--reload" in index.build_command(9000, True)
