"""Configuration layering: defaults, JSON file, environment."""

import json
import logging

import pytest

from calc_service.contentsloader import ConfigLoader
from calc_service.defaults import Config, Default, get_env_var
from calc_service.errors import LoadingException


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("HOST", "PORT", "LOG_DIR", "LOG_LEVEL", "CLIENT_TIMEOUT", "CLIENT_RETRIES", "CALC_CONFIG"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = Config.from_env()
    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.log_dir == "logs"
    assert config.retries == 1


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert Config.from_env().port == 9090


@pytest.mark.parametrize("value", ["", "not-a-port"])
def test_bad_port_falls_back(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    assert Config.from_env().port == 8080


def test_get_env_var(monkeypatch):
    monkeypatch.setenv("CLIENT_TIMEOUT", "2.5")
    assert get_env_var("CLIENT_TIMEOUT", 5, float) == 2.5
    assert get_env_var("MISSING_VARIABLE_FOR_TEST", 3, int) == 3


def test_default_groups():
    server, logging_defaults, client, files = Default().get_all()
    assert server["port"] == 8080
    assert logging_defaults["log_level"] == "INFO"
    assert client["timeout"] == 5
    assert files["config"] == "config.json"


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server": {"port": 9000, "host": "127.0.0.1"}, "client": {"timeout": 2}}))

    config = Config.from_sources(str(path))
    assert config.port == 9000
    assert config.host == "127.0.0.1"
    assert config.timeout == 2.0
    assert config.retries == 1


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server": {"port": 9000}}))
    monkeypatch.setenv("PORT", "7000")

    assert Config.from_sources(str(path)).port == 7000


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"server": {"port": 9100}}))
    monkeypatch.setenv("CALC_CONFIG", str(path))

    assert Config.from_sources().port == 9100


@pytest.mark.parametrize("content", [
    "{not json",
    "[]",
    "{}",
    json.dumps({"server": None}),
    json.dumps({"server": {"port": "eighty"}}),
])
def test_broken_file_keeps_defaults(tmp_path, caplog, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    logger = logging.getLogger("test.config")

    with caplog.at_level(logging.WARNING, logger="test.config"):
        config = Config.from_sources(str(path), logger)

    assert config == Config.from_default()
    assert any(r.name == "test.config" for r in caplog.records)


def test_missing_file_keeps_defaults(tmp_path):
    assert Config.from_sources(str(tmp_path / "absent.json")) == Config.from_default()


def test_unpackage():
    loader = ConfigLoader("unused.json")
    package = {"client": {"retries": 3}, "other": {"x": 1}, "server": {"port": 1}}

    assert loader.unpackage(package, ["server", "client"]) == {"client": {"retries": 3}, "server": {"port": 1}}
    with pytest.raises(LoadingException):
        loader.unpackage(package, [])
    with pytest.raises(LoadingException):
        loader.unpackage({"server": {}}, ["server"])


def test_unreadable_file_keeps_defaults(tmp_path, caplog):
    directory = tmp_path / "config.json"
    directory.mkdir()
    not_utf8 = tmp_path / "latin1.json"
    not_utf8.write_bytes(b'{"server": {"host": "\xe9"}}')
    logger = logging.getLogger("test.config")

    with caplog.at_level(logging.WARNING, logger="test.config"):
        assert Config.from_sources(str(directory), logger) == Config.from_default()
        assert Config.from_sources(str(not_utf8), logger) == Config.from_default()

    assert len([r for r in caplog.records if r.name == "test.config"]) == 2
