from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME = "eoshttp"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool, *, stream: TextIO | None = None) -> logging.Logger:
    """Route this package's log records to ``stream`` (stderr by default).

    Only the ``eoshttp`` logger gets a handler; the root logger is left to
    the application. Calling it again replaces the handler it added before.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_eoshttp", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._eoshttp = True
    logger.addHandler(handler)
    logger.propagate = False

    # request lines from httpx/httpcore follow the same verbosity
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(level)
    return logger
