from __future__ import annotations

import json

import pytest
import structlog

from resource_id.config import Settings
from resource_id.observability import configure_logging


@pytest.mark.unit
def test_json_logging_renders_event_and_context(capsys):
    configure_logging(Settings(_env_file=None, log_level="INFO", log_format="json"))
    structlog.get_logger("test").info("Resource id minted", resource="USER")

    record = json.loads(capsys.readouterr().out.strip())
    assert record["event"] == "Resource id minted"
    assert record["resource"] == "USER"
    assert record["level"] == "info"
    assert "timestamp" in record


@pytest.mark.unit
def test_log_level_filters_lower_levels(capsys):
    configure_logging(Settings(_env_file=None, log_level="ERROR", log_format="json"))
    logger = structlog.get_logger("test")
    logger.warning("Filtered out")
    logger.error("Kept")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "Kept"


@pytest.mark.unit
def test_text_format_uses_console_renderer(capsys):
    configure_logging(Settings(_env_file=None, log_level="INFO", log_format="text"))
    structlog.get_logger("test").info("Console line")
    assert "Console line" in capsys.readouterr().out
