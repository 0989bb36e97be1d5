# tests/test_logger.py
import logging

from app import logger


def test_configure_logging_syncs_framework_loggers(monkeypatch):
    monkeypatch.setattr(logger, "_configured", False)
    logger.configure_logging("WARNING")
    try:
        for name in ("uvicorn", "uvicorn.access", "gunicorn.error", "asyncio"):
            assert logging.getLogger(name).level == logging.WARNING
        assert logging.getLogger("openai").level == logging.WARNING
    finally:
        monkeypatch.setattr(logger, "_configured", False)
        logger.configure_logging()


def test_configure_logging_runs_once(monkeypatch):
    monkeypatch.setattr(logger, "_configured", True)
    before = logging.getLogger("asyncio").level
    logger.configure_logging("CRITICAL")
    assert logging.getLogger("asyncio").level == before
