import logging

from trade_service import config
from trade_service.logging import setup_logger


def test_setup_logger_console_only():
    logger = setup_logger("trade_service.tests.console", logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    # Handlers are only attached once
    assert setup_logger("trade_service.tests.console") is logger
    assert len(logger.handlers) == 1

def test_setup_logger_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "LOG_TO_FILE", True)
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))

    logger = setup_logger("trade_service.tests.file")
    try:
        logger.warning("sort rejected")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "trade_service.tests.file.log"
        assert "sort rejected" in log_file.read_text()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
