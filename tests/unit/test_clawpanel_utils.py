"""Unit tests for clawpanel.utils."""

import importlib
import logging
import logging.handlers

import pytest

from clawpanel.utils.get_home_dir import get_home_dir

logging_module = importlib.import_module("clawpanel.utils.configure_logging")


def test_home_from_env(clawpanel_home):
    assert get_home_dir() == clawpanel_home.resolve()
    assert get_home_dir("logs", "gateway.log") == clawpanel_home.resolve() / "logs" / "gateway.log"


def test_home_defaults_under_user_home(monkeypatch, tmp_path):
    monkeypatch.delenv("CLAWPANEL_HOME")
    assert get_home_dir() == tmp_path / ".clawpanel"


@pytest.fixture
def fresh_logging(monkeypatch):
    logger = logging.getLogger("clawpanel")
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(logging_module, "_CONFIGURED", False)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_writes_rotating_file(fresh_logging, tmp_path):
    logging_module.configure_logging(home=tmp_path, level="WARN", max_bytes=1024, backup_count=2)

    handler = fresh_logging.handlers[-1]
    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert handler.maxBytes == 1024
    assert handler.backupCount == 2
    assert fresh_logging.level == logging.WARNING

    logging.getLogger("clawpanel.api.service").warning("port busy")
    handler.flush()
    text = (tmp_path / "clawpanel.log").read_text(encoding="utf-8")
    assert "clawpanel.api.service - WARNING - port busy" in text


def test_configure_logging_only_once(fresh_logging, tmp_path):
    logging_module.configure_logging(home=tmp_path)
    count = len(fresh_logging.handlers)
    logging_module.configure_logging(home=tmp_path)
    assert len(fresh_logging.handlers) == count
    assert logging_module.is_configured() is True
