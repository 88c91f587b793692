"""Logging bootstrap for the studio package."""

from __future__ import annotations
import logging

from studio import config

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    # Streamlit re-executes the script on every interaction; attach the handler once.
    logger = logging.getLogger("studio")
    logger.setLevel(level or config.LOG_LEVEL)
    if not any(getattr(h, "_studio", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._studio = True
        logger.addHandler(handler)
    return logger
