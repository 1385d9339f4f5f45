"""Logging setup — a single RichHandler on the ``qualipure`` logger.

Library modules only call ``logging.getLogger(__name__)``; nothing is
printed until the CLI calls ``configure_logging``.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

ROOT_LOGGER = "qualipure"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Install the rich console handler once and set the level."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("[%(name)s]  %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        logger.debug("Logging initialised at %s", level)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
