import logging
import os
from logging.handlers import RotatingFileHandler

from trade_service import config


def setup_logger(name, log_level=None):
    """Configure and return a logger with the given name"""
    logger = logging.getLogger(name)
    logger.setLevel(log_level if log_level is not None else config.LOG_LEVEL)

    # Only add handlers if they don't already exist
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
        logger.addHandler(console_handler)

        if config.LOG_TO_FILE:
            if not os.path.exists(config.LOG_DIR):
                os.makedirs(config.LOG_DIR)

            # File handler with rotation (10 MB per file, max 5 files)
            file_handler = RotatingFileHandler(
                os.path.join(config.LOG_DIR, f"{name}.log"),
                maxBytes=10*1024*1024,
                backupCount=5
            )
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ))
            logger.addHandler(file_handler)

    return logger
