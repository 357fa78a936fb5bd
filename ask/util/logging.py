"""Logging configuration for the application."""

import logging
import sys

from ask.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Logfire carries the structured application events; this configures the
    stdlib loggers used by third-party libraries (uvicorn, httpx, redis).

    Args:
        settings: Application settings
    """
    # Production stays at INFO; search degradation is only visible with debug on
    level = logging.DEBUG if settings.debug else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("redis").setLevel(logging.WARNING)

    # Our application loggers stay at the configured level
    logging.getLogger("ask").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
