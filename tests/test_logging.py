"""Tests for structured logging setup."""

import json
import logging
import sys

from splitgen.logging import JSONFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("splitgen.test", logging.INFO, __file__, 10, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "splitgen.test"
        assert payload["message"] == "hello"
        assert "timestamp" in payload

    def test_run_extras_grouped_without_prefix(self):
        record = _record(splitgen_generation=3, splitgen_best_fitness=120.5, other="x")
        payload = json.loads(JSONFormatter().format(record))
        assert payload["run"] == {"generation": 3, "best_fitness": 120.5}
        assert "other" not in payload

    def test_no_run_key_without_extras(self):
        assert "run" not in json.loads(JSONFormatter().format(_record()))

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "splitgen.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info(),
            )
        payload = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in payload["exception"]


class TestSetupLogging:
    def test_json_handler_installed(self):
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging("json", level=logging.DEBUG)
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])

    def test_text_handler_installed(self):
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging("text")
            assert not isinstance(root.handlers[0].formatter, JSONFormatter)
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
