"""Tests for logging setup."""

import json
import logging

import pytest

from timelapse import TimeLapse
from timelapse.utils.logging import JSONFormatter, setup_logger


@pytest.fixture
def logger_name(request):
    """Unique logger per test; handlers are closed afterwards."""
    name = f"timelapse.tests.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


class TestJSONFormatter:
    """Test JSONFormatter class."""
    
    def test_format_plain_record(self):
        record = logging.LogRecord(
            name="timelapse",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="hello %s",
            args=("world",),
            exc_info=None
        )
        data = json.loads(JSONFormatter().format(record))
        
        assert data["level"] == "INFO"
        assert data["logger"] == "timelapse"
        assert data["message"] == "hello world"
        assert data["timestamp"].endswith("Z")
    
    def test_format_extra_data(self):
        record = logging.LogRecord(
            name="timelapse",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="TimeLapse load - Elapsed time: 1ms",
            args=(),
            exc_info=None
        )
        record.extra_data = {"label": "load", "elapsed_ns": 1_000_000}
        data = json.loads(JSONFormatter().format(record))
        
        assert data["label"] == "load"
        assert data["elapsed_ns"] == 1_000_000


class TestSetupLogger:
    """Test setup_logger function."""
    
    def test_writes_jsonl_file(self, tmp_path, logger_name):
        log_dir = tmp_path / "logs"
        logger = setup_logger(log_dir, name=logger_name)
        
        TimeLapse("query", logger=logger).log("query")
        for handler in logger.handlers:
            handler.flush()
        
        files = list(log_dir.glob("timelapse_*.jsonl"))
        assert len(files) == 1
        lines = files[0].read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        data = json.loads(lines[0])
        assert data["level"] == "INFO"
        assert data["label"] == "query"
        assert data["message"].startswith("TimeLapse query - Elapsed time: ")
    
    def test_verbose_adds_console_handler(self, logger_name):
        logger = setup_logger(verbose=True, name=logger_name)
        
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
    
    def test_no_outputs_stays_silent(self, logger_name):
        logger = setup_logger(name=logger_name)
        
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)
    
    def test_replaces_existing_handlers(self, tmp_path, logger_name):
        setup_logger(verbose=True, name=logger_name)
        logger = setup_logger(tmp_path, name=logger_name)
        
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.FileHandler)
    
    def test_level(self, logger_name):
        logger = setup_logger(level=logging.WARNING, name=logger_name)
        assert logger.level == logging.WARNING
