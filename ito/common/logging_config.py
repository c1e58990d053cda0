"""Logging configuration for the ito link service."""

import logging
import sys
from typing import List, Optional

LOGGER_NAME = "ito"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return logging.Formatter(JSON_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``ito`` logger used by every component.
    
    Calling it again replaces the handlers installed by the previous call,
    so the CLI and tests can reconfigure freely.
    
    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file to log to in addition to stdout
        json_format: Emit one JSON-shaped object per line
        
    Returns:
        The configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    
    formatter = _build_formatter(json_format)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    
    return logger
