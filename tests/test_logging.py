"""Tests for the structured logging helpers."""
import json
import logging

from core.logging.config import bootstrap_logging, shutdown_logging
from core.logging.context import context, get_context
from core.logging.formatter import JSONFormatter
from core.logging.levels import LogLevel, register_levels, to_level
from core.logging.logger import get_logger


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__(level=LogLevel.TRACE)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _captured_logger(name):
    handler = _Capture()
    base = logging.getLogger(name)
    base.setLevel(LogLevel.TRACE)
    base.addHandler(handler)
    return get_logger(name, service="svc"), handler


class TestLogging:

    def test_levels(self):
        register_levels()
        assert logging.getLevelName(25) == "SUCCESS"
        assert to_level("trace") == 5
        assert to_level("warning") == logging.WARNING
        assert to_level("nonsense") == logging.INFO

    def test_lazy_message_and_extra(self):
        log, handler = _captured_logger("tests.lazy")
        log.success(lambda: "relay-ok", extra={"reason": None, "detail": "x"})
        record = handler.records[-1]
        assert record.getMessage() == "relay-ok"
        assert record.service == "svc"
        assert record.detail == "x"

    def test_lazy_message_skipped_when_disabled(self):
        log, handler = _captured_logger("tests.disabled")
        logging.getLogger("tests.disabled").setLevel(logging.ERROR)
        called = []
        log.debug(lambda: called.append(1) or "never")
        assert called == []

    def test_json_formatter_includes_context_and_fields(self):
        log, handler = _captured_logger("tests.json")
        with context(external_id=239085):
            log.warning(lambda: "strategy-failed relay", extra={"reason": "timeout"})
            payload = json.loads(JSONFormatter().format(handler.records[-1]))
        assert payload["message"] == "strategy-failed relay"
        assert payload["context"] == {"external_id": 239085}
        assert payload["fields"] == {"reason": "timeout"}
        assert payload["service"] == "svc"

    def test_context_is_scoped(self):
        with context(a=1):
            with context(b=2):
                assert get_context() == {"a": 1, "b": 2}
            assert get_context() == {"a": 1}
        assert get_context() == {}


class TestFileLogging:

    def test_context_reaches_json_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        bootstrap_logging(service="svc", level="INFO", log_dir=tmp_path, log_file_name="fetch.jsonl", console=False)
        try:
            log = get_logger("tests.file", service="svc")
            plain = logging.getLogger("tests.file.plain")
            with context(external_id=239085):
                log.warning(lambda: "strategy-failed relay", extra={"reason": "timeout"})
                plain.info("GET https://relay.test -> 502")
            log.info(lambda: "outside")
        finally:
            shutdown_logging()
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

        lines = [json.loads(line) for line in (tmp_path / "fetch.jsonl").read_text(encoding="utf-8").splitlines()]
        by_message = {line["message"]: line for line in lines}
        assert by_message["strategy-failed relay"]["context"] == {"external_id": 239085}
        assert by_message["strategy-failed relay"]["fields"] == {"reason": "timeout"}
        assert by_message["GET https://relay.test -> 502"]["context"] == {"external_id": 239085}
        assert "context" not in by_message["outside"]
