"""Tests for configuration module."""

import pytest

from doc_history.config import AppConfig, CosmosConfig, Settings, VersioningConfig, _env, load_settings


def test_env_returns_value(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "hello")
    assert _env("TEST_KEY") == "hello"


def test_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY", "fallback") == "fallback"


def test_app_config_is_development_true():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "development")
    assert config.is_development is True


def test_app_config_is_development_false():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "production")
    assert config.is_development is False


def test_cosmos_config_defaults(monkeypatch):
    monkeypatch.setenv("COSMOS_ENDPOINT", "https://cosmos.example.com")
    monkeypatch.setenv("COSMOS_KEY", "secret")
    monkeypatch.delenv("COSMOS_DATABASE", raising=False)
    monkeypatch.delenv("COSMOS_CONTAINER", raising=False)
    config = CosmosConfig()
    assert config.endpoint == "https://cosmos.example.com"
    assert config.key == "secret"
    assert config.database == "doc-history"
    assert config.container == "documents"


def test_versioning_config_unset_is_unbounded(monkeypatch):
    monkeypatch.delenv("DOC_HISTORY_MAX_VERSIONS", raising=False)
    assert VersioningConfig().max_history is None


def test_versioning_config_parses_limit(monkeypatch):
    monkeypatch.setenv("DOC_HISTORY_MAX_VERSIONS", " 25 ")
    assert VersioningConfig().max_history == 25


def test_versioning_config_rejects_garbage(monkeypatch):
    monkeypatch.setenv("DOC_HISTORY_MAX_VERSIONS", "many")
    with pytest.raises(ValueError):
        VersioningConfig()


def test_load_settings_creates_all_sub_configs(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert isinstance(settings.cosmos, CosmosConfig)
    assert isinstance(settings.app, AppConfig)
    assert isinstance(settings.versioning, VersioningConfig)
    assert settings.app.log_level == "DEBUG"
