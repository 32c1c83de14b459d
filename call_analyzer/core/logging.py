"""
Logging setup
"""
import logging
from typing import Optional
from call_analyzer.core.config import settings

LOGGER_NAME = "call_analyzer"
log_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger with a console handler and an optional file handler"""
    level = (level or settings.LOG_LEVEL).upper()
    log_file = settings.LOG_FILE if log_file is None else log_file

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(log_formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(log_formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)

        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger"""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
