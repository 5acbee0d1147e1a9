"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at the temporary directories set up by the
autouse ``isolated_dirs`` fixture.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from todoqueue_cli.models import ConfigError
from todoqueue_cli.models.config_models import AppConfig
from todoqueue_cli.services.config_service import (
    DEFAULT_DATA_FILE,
    ConfigService,
    get_config_service,
)


@pytest.fixture()
def svc() -> ConfigService:
    service = ConfigService()
    _ = service.config
    return service


class TestConfigServiceInit:
    def test_directories_created(self, svc):
        assert svc.config_dir.is_dir()
        assert svc.data_dir.is_dir()

    def test_default_config_written_on_first_load(self, svc):
        assert svc.config_path.exists()
        data = json.loads(svc.config_path.read_text(encoding="utf-8"))
        assert data["storage"]["data_file"] is None
        assert data["logging"]["level"] == "INFO"

    def test_corrupt_config_raises(self, svc):
        svc.config_path.write_text("{broken", encoding="utf-8")
        fresh = ConfigService()
        with pytest.raises(ConfigError, match="Failed to load config"):
            fresh.load_config()

    def test_get_config_service_is_cached(self):
        assert get_config_service() is get_config_service()


class TestGetSet:
    def test_get_nested_value(self, svc):
        assert svc.get("output.color") is True

    def test_get_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.get("output.nope")

    def test_set_persists(self, svc):
        svc.set("storage.data_file", "/tmp/elsewhere.json")

        reloaded = ConfigService()
        assert reloaded.get("storage.data_file") == "/tmp/elsewhere.json"

    def test_set_normalises_log_level(self, svc):
        svc.set("logging.level", "debug")
        assert svc.get("logging.level") == "DEBUG"

    def test_set_invalid_log_level(self, svc):
        with pytest.raises(ValidationError):
            svc.set("logging.level", "LOUD")

    def test_set_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.set("storage.missing", "x")

    def test_reset_single_key(self, svc):
        svc.set("output.color", False)
        svc.reset("output.color")
        assert svc.get("output.color") is True

    def test_reset_section(self, svc):
        svc.set("logging.level", "ERROR")
        svc.reset("logging")
        assert svc.get("logging.level") == "INFO"

    def test_reset_all(self, svc):
        svc.set("storage.data_file", "x.json")
        svc.reset()
        assert svc.config == AppConfig()


class TestResolveDataFile:
    def test_default_location(self, svc):
        assert svc.resolve_data_file() == svc.data_dir / DEFAULT_DATA_FILE

    def test_configured_location(self, svc, tmp_path):
        svc.set("storage.data_file", str(tmp_path / "custom.json"))
        assert svc.resolve_data_file() == tmp_path / "custom.json"

    def test_override_wins(self, svc, tmp_path):
        svc.set("storage.data_file", str(tmp_path / "custom.json"))
        assert svc.resolve_data_file(tmp_path / "cli.json") == Path(tmp_path / "cli.json")
