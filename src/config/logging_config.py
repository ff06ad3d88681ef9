"""
Yahtzee Engine - Logging Configuration

Applies the configured log level to the ``src`` logger hierarchy.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure logging for the engine.

    Args:
        settings: Settings to apply (cached settings when None)

    Returns:
        The package root logger
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )

    logging.basicConfig(format=LOG_FORMAT)
    root = logging.getLogger("src")
    root.setLevel(level)
    return root
