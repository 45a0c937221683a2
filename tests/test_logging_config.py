"""JSON logging setup tests."""

import json
import logging

import pytest

from relay.logging_config import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True


def test_emits_json_with_renamed_fields(capsys, restore_logging):
    setup_logging("DEBUG")
    logging.getLogger("relay.test").info("search requested", extra={"query": "python"})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "search requested"
    assert record["level"] == "INFO"
    assert record["logger"] == "relay.test"
    assert record["query"] == "python"
    assert record["service"] == "search-relay"
    assert "timestamp" in record


def test_unknown_level_falls_back_to_info(restore_logging):
    setup_logging("nonsense")
    assert logging.getLogger().level == logging.INFO


def test_uvicorn_loggers_share_root_handler(restore_logging):
    setup_logging()
    root_handler = logging.getLogger().handlers[0]
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        assert uv_logger.handlers == [root_handler]
        assert uv_logger.propagate is False
