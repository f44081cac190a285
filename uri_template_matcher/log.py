"""Package logging setup."""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "uri_template_matcher"
FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"
DEBUG_ENV = "URI_TEMPLATE_MATCHER_DEBUG"


def _debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() in ["1", "true", "yes", "on"]


def _already_configured(log: logging.Logger) -> bool:
    if not log.handlers:
        return False

    for handler in log.handlers:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream == sys.stdout:
                return True

    return False


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Send package logs to stdout.

    Match decisions are logged at DEBUG level. When ``debug`` is not given it
    is read from the URI_TEMPLATE_MATCHER_DEBUG environment variable.

    """
    if debug is None:
        debug = _debug_from_env()

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.DEBUG if debug else logging.ERROR)
    if _already_configured(log):
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT_STRING))
    log.propagate = False
    log.addHandler(handler)
    return log
