"""Logging setup shared by every orderdesk module."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_ENV = "ORDERDESK_LOG_LEVEL"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    The root handler is installed once, on first use. The level comes from
    ORDERDESK_LOG_LEVEL (default WARNING).

    Args:
        name: Logger name, normally ``__name__``

    Returns:
        Configured logger
    """
    _configure_root()
    return logging.getLogger(name)
