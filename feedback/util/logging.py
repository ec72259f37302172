"""Logging configuration for the application."""

import logging
import sys

from feedback.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Domain code logs through logfire; this covers uvicorn, SQLAlchemy and
    anything else that uses the ``logging`` module.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL echo is controlled by settings.debug on the engine instead
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("feedback").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
