"""Unit tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from source_mirror.logging import configure_logging, get_logger
from source_mirror.settings import Settings


@pytest.fixture
def restore_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.mark.unit
class TestConfigureLogging:

    def test_json_records_carry_service_and_context(self, capsys, restore_logging):
        configure_logging("DEBUG", service_name="source-mirror")

        get_logger("tests.mirror", path="/srv/build/Tasmota").info("Pulling mirror")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Pulling mirror"
        assert record["service"] == "source-mirror"
        assert record["path"] == "/srv/build/Tasmota"
        assert record["level"] == "info"
        assert record["logger"] == "tests.mirror"

    def test_level_filters_records(self, capsys, restore_logging):
        configure_logging("WARNING")

        get_logger("tests.quiet").info("not shown")

        assert "not shown" not in capsys.readouterr().out

    def test_settings_setup_logging(self, monkeypatch, tmp_path, capsys, restore_logging):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MIRROR_LOG_LEVEL", "INFO")
        monkeypatch.setenv("MIRROR_LOG_JSON", "false")

        Settings().setup_logging()
        get_logger("tests.console").info("Mirror prepared")

        out = capsys.readouterr().out
        assert "Mirror prepared" in out
        assert not out.strip().splitlines()[-1].startswith("{")
