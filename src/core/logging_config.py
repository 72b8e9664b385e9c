"""Logging configuration for the ray tracer."""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("RAYTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

ROOT_LOGGER_NAMES = ("core", "geometry", "materials", "camera", "renderer")


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Attach handlers to the tracer's package loggers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to an additional log file

    Returns:
        The logger for the renderer package
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)

    for name in ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        # Calling twice must not duplicate output.
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)

    return logging.getLogger("renderer")
