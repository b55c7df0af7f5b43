"""
Unit tests for settings parsing and environment loading
"""
import importlib

import run

from author_dict.config.loader import ConfigLoader
from author_dict.config.settings import DatabaseSettings, Environment, LogLevel, SecuritySettings, Settings

settings_module = importlib.import_module("author_dict.config.settings")


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.database.url.startswith("sqlite")
    assert settings.dictionary.api_url == "https://api.dictionaryapi.dev/api/v2/entries/en"
    assert settings.dictionary.timeout_seconds > 0
    assert settings.max_request_size_bytes == 10 * 1024 * 1024


def test_environment_and_log_level_normalized():
    settings = Settings(_env_file=None, environment="Production", log_level="debug")

    assert settings.environment == Environment.PRODUCTION
    assert settings.is_production()
    assert settings.log_level == LogLevel.DEBUG


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("SECURITY_CORS_ORIGINS", "https://a.example, https://b.example")

    security = SecuritySettings()

    assert security.cors_origins == ["https://a.example", "https://b.example"]


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///quotes.db")

    assert DatabaseSettings().url == "sqlite:///quotes.db"


def test_loader_reads_environment_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # the loader swaps the process-wide settings; put them back afterwards
    monkeypatch.setattr(settings_module, "settings", settings_module.settings)
    (tmp_path / ".env.testing").write_text("APP_NAME=Quote Finder\nPORT=4000\n")
    (tmp_path / ".env.unknown").write_text("PORT=1\n")

    assert ConfigLoader.get_available_environments() == ["testing"]
    assert ConfigLoader.validate_environment_config("testing")
    assert not ConfigLoader.validate_environment_config("staging")
    assert not ConfigLoader.validate_environment_config("nonsense")

    settings = ConfigLoader.load_environment_config("testing")
    assert settings.app_name == "Quote Finder"
    assert settings.port == 4000


def test_loader_invalid_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.staging").write_text("PORT=not-a-port\n")

    assert not ConfigLoader.validate_environment_config("staging")


def test_loader_environment_file_reaches_nested_groups(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "settings", settings_module.settings)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DICTIONARY_TIMEOUT_SECONDS", raising=False)
    (tmp_path / ".env.staging").write_text(
        "DATABASE_URL=sqlite:///staging.db\nDICTIONARY_TIMEOUT_SECONDS=2.5\n"
    )

    settings = ConfigLoader.load_environment_config("staging")

    assert settings.database.url == "sqlite:///staging.db"
    assert settings.dictionary.timeout_seconds == 2.5


def test_worker_environment_rebuilds_overridden_settings(monkeypatch):
    settings = Settings(_env_file=None, environment="staging", debug=True, log_level="warning")
    settings.database.url = "sqlite:///cli-override.db"

    exported = run.worker_environment(settings)
    for name, value in exported.items():
        monkeypatch.setenv(name, value)

    # What a reload or multi-worker process sees when it builds its settings
    rebuilt = Settings(_env_file=None)
    assert rebuilt.environment == Environment.STAGING
    assert rebuilt.debug is True
    assert rebuilt.log_level == LogLevel.WARNING
    assert rebuilt.database.url == "sqlite:///cli-override.db"
