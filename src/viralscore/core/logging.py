"""Structured logging for the service and the CLI.

Everything goes to one stream, stderr unless told otherwise, so that
``viralscore check --json`` can own stdout. Development gets a console
renderer (colored only on a terminal); any other env gets one JSON object
per line, stamped with the app name and env for log aggregation.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from viralscore.config import Settings

APP_NAME = "viralscore"


def _app_context(env: str) -> structlog.types.Processor:
    def add_app_context(
        _logger: Any, _method: str, event_dict: structlog.types.EventDict
    ) -> structlog.types.EventDict:
        event_dict.setdefault("app", APP_NAME)
        event_dict.setdefault("env", env)
        return event_dict

    return add_app_context


def _processors(settings: "Settings", stream: TextIO) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.env == "development":
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))
    else:
        processors += [
            _app_context(settings.env),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return processors


def setup_logging(settings: "Settings", stream: TextIO | None = None) -> None:
    """Configure structlog and route standard library logging to the same stream."""
    stream = stream if stream is not None else sys.stderr
    level = getattr(logging, settings.log_level)

    structlog.configure(
        processors=_processors(settings, stream),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # uvicorn and fastapi log through the standard library
    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(stream)],
        force=True,
    )
    # One line per scored request is noise next to "Post reviewed"
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
