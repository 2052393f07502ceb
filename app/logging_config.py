"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain stdlib logging from ``LOG_LEVEL``."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("app").setLevel(level)

    # Request lines are noise outside development.
    if not app.debug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
