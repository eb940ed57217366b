import json
import logging

import pytest
from rich.logging import RichHandler

from simparse.logger import logger
from simparse.utils import running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_mode_from_env(monkeypatch):
    monkeypatch.setenv("SIMPARSE_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler, logging.StreamHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_setup_logging_json_file(tmp_path):
    log_file = tmp_path / "simparse.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    logger.info("parsed %s", "nvidia-smi")
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "parsed nvidia-smi"
    assert records[-1]["name"] == "simparse"
    assert records[-1]["levelname"] == "INFO"


def test_setup_logging_plain_file(tmp_path):
    log_file = tmp_path / "simparse.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logger.warning("unknown flag")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "[simparse] [WARNING] unknown flag" in log_file.read_text()
