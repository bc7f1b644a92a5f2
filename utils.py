"""
Logging helpers shared by the app, controllers and game package
"""
import logging

from config import AppConfig


def setup_logging(level=None):
    """
    Configure the root logger once at program start.
    Falls back to INFO when the configured level name is unknown.
    """
    level = (level or AppConfig.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name):
    return logging.getLogger(name)
