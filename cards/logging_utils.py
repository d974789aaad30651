"""Logging setup shared by the library and its callers."""

import logging

from cards.config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start. Defaults to CARDS_LOG_LEVEL."""
    level = (level or config.log.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=config.log.format,
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
