"""Logging configuration for the gardenctl package."""
import logging
import sys

from gardenctl.config import Settings


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a logger with the specified name and log level.

    Args:
        name: The name of the logger
        level: The logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(Settings.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


def setup_logging(debug_mode: bool = False) -> logging.Logger:
    """Configure the gardenctl logger based on debug mode."""
    level = logging.DEBUG if debug_mode else getattr(logging, Settings.LOG_LEVEL, logging.INFO)
    logger = setup_logger("gardenctl", level)
    for handler in logger.handlers:
        handler.setLevel(level)

    # Disable debug logging for noisy libraries
    if not debug_mode:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('kubernetes').setLevel(logging.WARNING)

    return logger
