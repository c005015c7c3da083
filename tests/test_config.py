import logging

from engine import config

import pytest


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "engine.json"
    monkeypatch.setattr(config, "_CONFIG_PATH", path)
    config.reload()
    yield path
    config.reload()


def test_dotted_lookup(config_file):
    config_file.write_text('{"world": {"chunk_size": [8, 8, 8], "name": "demo"}}', encoding="utf-8")
    assert config.get("world.chunk_size") == [8, 8, 8]
    assert config.get("world.name") == "demo"
    assert config.get("world.missing", 3) == 3
    assert config.get("world.name.deeper", "x") == "x"
    assert config.get("")["world"]["name"] == "demo"


def test_missing_file_uses_defaults(config_file):
    assert config.get("world.chunk_size", (16, 16, 16)) == (16, 16, 16)


def test_malformed_file_logs_and_uses_defaults(config_file, caplog):
    config_file.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="engine.config"):
        assert config.get("world.chunk_size", "fallback") == "fallback"
    assert "unreadable config" in caplog.text


def test_non_object_file_is_ignored(config_file, caplog):
    config_file.write_text("[1, 2, 3]", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="engine.config"):
        assert config.get("anything", 5) == 5
    assert "not an object" in caplog.text


def test_reload_picks_up_changes(config_file):
    config_file.write_text('{"a": 1}', encoding="utf-8")
    assert config.get("a") == 1
    config_file.write_text('{"a": 2}', encoding="utf-8")
    assert config.get("a") == 1
    config.reload()
    assert config.get("a") == 2


def test_shipped_defaults():
    config.reload()
    try:
        assert config.get("world.chunk_size") == [16, 16, 16]
    finally:
        config.reload()


def test_missing_file_is_cached_until_reload(config_file):
    assert config.get("a", "unset") == "unset"
    config_file.write_text('{"a": 1}', encoding="utf-8")
    assert config.get("a", "unset") == "unset"
    config.reload()
    assert config.get("a") == 1
