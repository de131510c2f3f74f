"""Tests for structlog configuration."""
import json

import structlog

from ryst_openai.logging import configure_logging, drop_secrets, new_request_id


def test_drop_secrets_masks_credentials() -> None:
    event = drop_secrets(None, "info", {"event": "x", "api_key": "sk-secret", "model": "m"})
    assert event == {"event": "x", "api_key": "***", "model": "m"}


def test_new_request_id_is_unique() -> None:
    assert new_request_id() != new_request_id()


def test_configure_logging_json_filters_by_level(capsys) -> None:
    configure_logging(json_logs=True, level="WARNING")
    try:
        log = structlog.get_logger("test")
        log.info("hidden")
        log.warning("shown", api_key="sk-secret")
        lines = [line for line in capsys.readouterr().err.splitlines() if line]
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "shown"
        assert record["level"] == "warning"
        assert record["api_key"] == "***"
        assert "timestamp" in record
    finally:
        structlog.reset_defaults()
