"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from ssm_filters.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_bound_values_are_emitted(self) -> None:
        log = get_logger("ssm_filters.test", operation="DescribeParameters")
        with capture_logs() as logs:
            log.info("request.built", filter_count=2)
        assert logs == [
            {
                "event": "request.built",
                "log_level": "info",
                "operation": "DescribeParameters",
                "filter_count": 2,
            }
        ]

    def test_without_initial_values(self) -> None:
        log = get_logger("ssm_filters.test")
        with capture_logs() as logs:
            log.warning("careful")
        assert logs[0]["event"] == "careful"


class TestJsonLoggerFactory:
    @pytest.mark.usefixtures("restore_logging")
    def test_configures_root_handler(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    @pytest.mark.usefixtures("restore_logging")
    def test_accepts_level_name(self) -> None:
        JsonLoggerFactory.configure("warning")
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.usefixtures("restore_logging")
    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        structlog.get_logger("ssm_filters.json").info("filter.checked", key="Name")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "filter.checked"
        assert record["key"] == "Name"
        assert record["level"] == "info"

    @pytest.mark.usefixtures("restore_logging")
    def test_configure_from_settings_uses_log_level(self) -> None:
        from ssm_filters.config import QuerySettings

        settings = QuerySettings(log_level="ERROR")
        assert JsonLoggerFactory.configure_from_settings(settings) is settings
        assert logging.getLogger().level == logging.ERROR

    @pytest.mark.usefixtures("restore_logging")
    def test_configure_from_settings_loads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSM_FILTERS_LOG_LEVEL", "debug")
        monkeypatch.setenv("SSM_FILTERS_MAX_RESULTS", "20")
        settings = JsonLoggerFactory.configure_from_settings()
        assert settings.max_results == 20
        assert logging.getLogger().level == logging.DEBUG
