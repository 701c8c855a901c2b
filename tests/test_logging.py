"""Tests for logging utilities."""

import json
import logging

from path_relativizer import setup_logging, LogContext
from path_relativizer.logging import StructuredFormatter, build_formatter


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_emits_json(self):
        record = logging.makeLogRecord({
            "name": "path_relativizer.test",
            "levelname": "INFO",
            "msg": "hello %s",
            "args": ("world",),
        })
        data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "path_relativizer.test"

    def test_includes_extra_fields(self):
        record = logging.makeLogRecord({"msg": "x", "extra_fields": {"pair_line": 3}})
        data = json.loads(StructuredFormatter().format(record))
        assert data["pair_line"] == 3


class TestBuildFormatter:
    """Tests for build_formatter."""

    def test_json(self):
        assert isinstance(build_formatter("json"), StructuredFormatter)

    def test_detailed_includes_location(self):
        assert "%(lineno)d" in build_formatter("detailed")._fmt

    def test_unknown_falls_back_to_simple(self):
        formatter = build_formatter("fancy")
        assert not isinstance(formatter, StructuredFormatter)
        assert "%(asctime)s" not in formatter._fmt


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_console_handler(self):
        setup_logging(level="debug", format="detailed")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(level="INFO", log_file=log_file)

        logging.getLogger("path_relativizer.test").info("written to file")

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "written to file"


class TestLogContext:
    """Tests for LogContext."""

    def test_adds_fields_inside_context(self, caplog):
        logger = logging.getLogger("path_relativizer.test")
        with caplog.at_level(logging.INFO):
            with LogContext(logger, batch_input="pairs.tsv"):
                logger.info("inside")
            logger.info("outside")

        inside, outside = caplog.records
        assert inside.extra_fields == {"batch_input": "pairs.tsv"}
        assert not hasattr(outside, "extra_fields")

    def test_call_fields_merge_with_context(self, caplog):
        logger = logging.getLogger("path_relativizer.test")
        with caplog.at_level(logging.INFO):
            with LogContext(logger, batch_input="-"):
                logger.info("merged", extra={"extra_fields": {"pair_line": 2}})

        assert caplog.records[0].extra_fields == {"batch_input": "-", "pair_line": 2}

    def test_removes_filter_on_exit(self):
        logger = logging.getLogger("path_relativizer.test")
        with LogContext(logger, a=1) as context:
            assert context in logger.filters
        assert context not in logger.filters
