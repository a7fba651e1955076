import json
import logging
from datetime import datetime

import pytest

from campaignbot import logging_setup


@pytest.fixture
def root_logger(monkeypatch):
    monkeypatch.setattr(logging_setup, "_configured", False)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_json_logs_emit_one_object_per_line(root_logger, capsys):
    logging_setup.setup_logging(json_logs=True)
    logging_setup.setup_logging(json_logs=False)  # ignored once configured
    logging_setup.get_logger("Coordinator").info("hello %s", "world")
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])

    assert datetime.fromisoformat(payload.pop("time")).tzinfo is not None
    assert payload == {"level": "INFO", "name": "campaignbot.Coordinator", "message": "hello world"}


def test_level_accepts_names(root_logger):
    logging_setup.setup_logging(level="debug")
    assert root_logger.level == logging.DEBUG


def test_unknown_level_rejected(root_logger):
    with pytest.raises(ValueError):
        logging_setup.setup_logging(level="LOUD")
    assert logging_setup._configured is False


def test_unknown_level_leaves_existing_handlers_alone(root_logger):
    existing = logging.NullHandler()
    root_logger.addHandler(existing)

    with pytest.raises(ValueError):
        logging_setup.setup_logging(level="LOUD")

    assert existing in root_logger.handlers


def test_resolve_level():
    assert logging_setup.resolve_level("warning") == logging.WARNING
    assert logging_setup.resolve_level(logging.ERROR) == logging.ERROR
