from pathlib import Path

import pytest
from pydantic import ValidationError

from roster.config import Settings, get_settings
from roster.core.exceptions import ConfigurationError
from roster.main import RosterPlatform
from roster.services.registry import ServiceRegistry

import add_data


def test_defaults(monkeypatch):
    monkeypatch.delenv("ROSTER_DATA_DIR", raising=False)
    settings = Settings(_env_file=None)
    assert settings.data_dir == Path(".data")
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ROSTER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ROSTER_PORT", "9000")
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "debug")
    settings = get_settings(_env_file=None)
    assert (settings.data_dir, settings.port, settings.log_level) == (tmp_path, 9000, "DEBUG")


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


def test_data_dir_must_be_a_directory(tmp_path):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ServiceRegistry.from_directory(not_a_dir)


def test_platform_builds_an_app_over_the_data_dir(tmp_path):
    platform = RosterPlatform(Settings(_env_file=None, data_dir=tmp_path / "records"))
    assert (tmp_path / "records" / "class.json").exists()
    assert platform.app.title == "Roster School Records API"


def test_sample_loader_targets_the_configured_server(monkeypatch):
    monkeypatch.delenv("ROSTER_BASE_URL", raising=False)
    monkeypatch.delenv("ROSTER_HOST", raising=False)
    monkeypatch.setenv("ROSTER_PORT", "9100")
    assert add_data._detect_base_url() == "http://127.0.0.1:9100"


def test_sample_loader_prefers_an_explicit_url(monkeypatch):
    monkeypatch.setenv("ROSTER_BASE_URL", "http://records.internal:8080")
    assert add_data._detect_base_url() == "http://records.internal:8080"
