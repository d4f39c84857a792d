"""
Library logging configuration.

This module provides the shared logger for the fuid package. Decode
rejections and backend selection are logged at DEBUG so they stay quiet
unless FUID_LOG_LEVEL asks for them.

By default fuid writes nothing itself: records propagate to whatever
handlers the host application configured. FUID_LOG_HANDLER=stderr (or
stdout) gives fuid its own console handler instead.
"""
import logging
import sys

from fuid.config import settings

HANDLER_NAME = "fuid"


def setup_logging() -> logging.Logger:
    """
    Configure and return the fuid logger.

    With a console handler enabled the output uses a structured format
    including:
    - Timestamp
    - Logger name
    - Log level
    - Message

    The level comes from settings.LOG_LEVEL (FUID_LOG_LEVEL) and the
    destination from settings.LOG_HANDLER (FUID_LOG_HANDLER).

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger("fuid")
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Replace only the handler installed here, never ones added by the host
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    if settings.LOG_HANDLER == "none":
        handler = logging.NullHandler()
        logger.propagate = True
    else:
        stream = sys.stdout if settings.LOG_HANDLER == "stdout" else sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        # Records would otherwise be printed again by the root handlers
        logger.propagate = False

    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)

    return logger
