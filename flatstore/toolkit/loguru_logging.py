"""
Logging for the `flatstore` service.

Everything goes through `loguru`. The standard `logging` records (`uvicorn`, `fastapi`) are intercepted and
re-emitted through `loguru`, so the storage and the server end up in the same sinks.

Importing this module configures nothing: the API server calls `configure_logging()`. An application that uses
the storage as a library keeps its own sinks.
"""

import logging
import sys

from loguru import logger

INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")

# Ids of the sinks added by `configure_logging()`, so that calling it again replaces only them
_sink_ids: list[int] = []


class InterceptHandler(logging.Handler):
    """The `logging` logs interceptor."""

    def emit(self, record: logging.LogRecord):
        """Intercept the `logging` logs and redirect them to `loguru`."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip the `logging` frames, so `loguru` reports the original caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str, serialize: bool, use_file_logs: bool) -> None:
    """Add the `flatstore` sinks and route the server's standard `logging` to them."""
    # Remove the default logger, if nobody did it already
    try:
        logger.remove(0)
    except (KeyError, ValueError):
        pass

    while _sink_ids:
        logger.remove(_sink_ids.pop())

    _sink_ids.append(logger.add(sys.stderr, level=level, serialize=serialize, backtrace=True, diagnose=False))

    if use_file_logs:
        _sink_ids.append(logger.add("logs/{time}.log", encoding="utf-8", rotation="00:00", level=level))

    # No-op if the root logger is configured already
    logging.basicConfig(handlers=[InterceptHandler()], level=0)
    for name in INTERCEPTED_LOGGERS:
        intercepted_logger = logging.getLogger(name)
        intercepted_logger.handlers = [InterceptHandler()]
        intercepted_logger.propagate = False


__all__ = ["logger", "InterceptHandler", "configure_logging"]
