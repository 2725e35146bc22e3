"""Logging utilities for Selectorsmith."""

import logging
import sys
from datetime import datetime

import config


def setup_logger(name: str = "selectorsmith") -> logging.Logger:
    """
    Set up and return a logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    log_file = config.LOGS_DIR / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger


# Default logger
logger = setup_logger()


def log_selector(kind: str, text: str):
    """Log a rendered selector."""
    logger.debug(f"[{kind}] rendered {text!r}")


def log_decode(type_name: str, field_count: int):
    """Log a JSON document attached to a prototype."""
    logger.debug(f"Decoded {field_count} field(s) onto {type_name}")
