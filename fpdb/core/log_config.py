"""Logging setup for the error and activity logs."""

import logging
import sys

from fpdb.core.config import Settings

ACTIVITY_LOGGER_NAME = "fpdb.activity"

ERROR_FORMAT = "error: %(asctime)s %(filename)s:%(lineno)d: %(message)s"
ACTIVITY_FORMAT = "server: %(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def _make_handler(log_file: str | None, fmt: str) -> logging.Handler:
    """
    Create a handler appending to log_file, or writing to stdout.

    Raises:
        OSError: If log_file cannot be opened
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, DATE_FORMAT))
    return handler


def _replace_handlers(target: logging.Logger, handler: logging.Handler) -> None:
    for old in list(target.handlers):
        target.removeHandler(old)
        old.close()
    target.addHandler(handler)
    target.propagate = False


def configure_logging(settings: Settings) -> None:
    """
    Configure the application loggers.

    Messages from the fpdb package go to LOG_FILE (or stdout) prefixed with
    their source location. Request activity goes to the same place through a
    separate logger which only emits when LOG_ACTIVITY is enabled.
    """
    log_file = settings.LOG_FILE
    try:
        error_handler = _make_handler(log_file, ERROR_FORMAT)
        activity_handler = _make_handler(log_file, ACTIVITY_FORMAT)
        fallback = False
    except OSError:
        log_file = None
        error_handler = _make_handler(None, ERROR_FORMAT)
        activity_handler = _make_handler(None, ACTIVITY_FORMAT)
        fallback = True

    app_logger = logging.getLogger("fpdb")
    _replace_handlers(app_logger, error_handler)
    app_logger.setLevel(settings.LOG_LEVEL.upper())

    activity_logger = logging.getLogger(ACTIVITY_LOGGER_NAME)
    _replace_handlers(activity_logger, activity_handler)
    activity_logger.setLevel(logging.INFO)
    activity_logger.disabled = not settings.LOG_ACTIVITY

    if fallback:
        app_logger.warning(
            "cannot open %s; logging to standard output instead", settings.LOG_FILE
        )
    elif log_file:
        app_logger.info("logging to %s", log_file)
    else:
        app_logger.info("logging to standard output")
