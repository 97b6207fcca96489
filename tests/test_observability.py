"""Tests for logging and event hooks."""

import json
import logging

import pytest

from catalogue.observability.hooks import CatalogueEvent, EventData, EventHookRegistry
from catalogue.observability.logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="catalogue.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestEventHookRegistry:
    """Test event subscription and triggering."""

    def test_on_and_trigger(self, hooks):
        received = []
        hooks.on(CatalogueEvent.DEMO_END, received.append)

        hooks.trigger(CatalogueEvent.DEMO_END, pattern="state", lines=4)
        hooks.trigger(CatalogueEvent.DEMO_START, pattern="state")

        assert len(received) == 1
        assert received[0].pattern == "state"
        assert received[0].data == {"lines": 4}

    def test_duplicate_subscription_ignored(self, hooks):
        received = []
        hooks.on(CatalogueEvent.CUSTOM, received.append)
        hooks.on(CatalogueEvent.CUSTOM, received.append)

        hooks.trigger(CatalogueEvent.CUSTOM)

        assert len(received) == 1

    def test_off(self, hooks):
        received = []
        hooks.on(CatalogueEvent.CUSTOM, received.append)
        hooks.off(CatalogueEvent.CUSTOM, received.append)

        hooks.trigger(CatalogueEvent.CUSTOM)

        assert received == []

    def test_off_all(self, hooks):
        received = []
        hooks.on_all(received.append)
        hooks.off_all(received.append)

        hooks.trigger(CatalogueEvent.CUSTOM)

        assert received == []

    def test_disable(self, hooks, events):
        hooks.disable()
        hooks.trigger(CatalogueEvent.CUSTOM)
        assert not hooks.is_enabled

        hooks.enable()
        hooks.trigger(CatalogueEvent.CUSTOM)

        assert len(events) == 1

    def test_hook_errors_are_swallowed(self, hooks, events):
        def broken(_data):
            raise ValueError("observer failure")

        hooks.on(CatalogueEvent.CUSTOM, broken)
        hooks.trigger(CatalogueEvent.CUSTOM)

        assert len(events) == 1

    def test_explicit_event_data(self, hooks, events):
        data = EventData(event=CatalogueEvent.CUSTOM, pattern="facade")
        hooks.trigger(CatalogueEvent.CUSTOM, data)

        assert events == [data]

    def test_clear_and_list(self, hooks):
        hooks.on(CatalogueEvent.CUSTOM, print)
        hooks.on_all(print)

        assert hooks.list_hooks() == {"custom": 1, "_global": 1}
        assert hooks.list_hooks(CatalogueEvent.CUSTOM) == {"custom": 1}

        hooks.clear()

        assert hooks.list_hooks() == {"_global": 0}

    def test_event_data_to_dict(self):
        data = EventData(
            event=CatalogueEvent.DEMO_ERROR,
            pattern="proxy",
            error=RuntimeError("boom"),
            duration_ms=1.5,
        )

        result = data.to_dict()

        assert result["event"] == "demo_error"
        assert result["pattern"] == "proxy"
        assert result["error"] == "boom"
        assert result["duration_ms"] == 1.5
        assert "session_id" not in result


class TestFormatters:
    """Test log formatters."""

    def test_structured_formatter(self):
        record = make_record(pattern="visitor", session_id="s1", duration_ms=2.5)

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["message"] == "hello"
        assert payload["pattern"] == "visitor"
        assert payload["session_id"] == "s1"
        assert payload["duration_ms"] == 2.5
        assert "timestamp" in payload

    def test_structured_formatter_without_timestamp(self):
        payload = json.loads(StructuredFormatter(include_timestamp=False).format(make_record()))

        assert "timestamp" not in payload

    def test_human_readable_formatter(self):
        record = make_record(pattern="visitor", session_id="abcdef123456", step=3)

        line = HumanReadableFormatter(use_colors=False).format(record)

        assert "INFO" in line
        assert "[pattern=visitor, session=abcdef12, step=3]" in line
        assert line.endswith(" hello")


class TestCatalogueLogger:
    """Test context injection."""

    def test_context_is_attached(self, caplog):
        caplog.set_level(logging.DEBUG, logger="catalogue")
        logger = get_logger("runner", session_id="sess", pattern="state")

        logger.info("ran", step=2, duration_ms=1.239, extra={"lines": 4})

        record = caplog.records[-1]
        assert record.name == "catalogue.runner"
        assert record.pattern == "state"
        assert record.session_id == "sess"
        assert record.step == 2
        assert record.duration_ms == 1.24
        assert record.extra_data == {"lines": 4}

    def test_with_context(self, caplog):
        caplog.set_level(logging.DEBUG, logger="catalogue")
        logger = get_logger("runner", session_id="sess").with_context(pattern="memento")

        logger.warning("careful")

        record = caplog.records[-1]
        assert logger.name == "catalogue.runner"
        assert record.pattern == "memento"
        assert record.session_id == "sess"


class TestConfigureLogging:
    """Test handler installation."""

    @pytest.mark.usefixtures("reset_catalogue_logging")
    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "catalogue.log"
        configure_logging(level="debug", log_file=log_file, use_colors=False)

        get_logger("test").info("written", pattern="builder")
        for handler in logging.getLogger("catalogue").handlers:
            handler.flush()

        payload = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert payload["message"] == "written"
        assert payload["pattern"] == "builder"

    @pytest.mark.usefixtures("reset_catalogue_logging")
    def test_reconfiguring_replaces_handlers(self):
        configure_logging(level="INFO")
        configure_logging(level="WARNING", json_format=True)

        logger = logging.getLogger("catalogue")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logger.level == logging.WARNING
