import logging
import os
import sys

import structlog
from structlog.contextvars import merge_contextvars


def _add_app_and_env(app_name: str):
    def processor(logger, method_name, event_dict):
        event_dict["app"] = app_name
        event_dict["env"] = os.getenv("APP_ENV", "local")
        return event_dict

    return processor


def configure_logging(level: str | None = None, app_name: str = "gainz") -> None:
    """Configure structlog once per process.

    ``LOG_LEVEL`` in the environment wins over ``level``; local and dev
    environments get console output, everything else JSON lines.
    """
    log_level_name = (os.getenv("LOG_LEVEL") or level or "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    is_dev = os.getenv("APP_ENV", "local") in {"local", "dev"}

    shared_processors = [
        merge_contextvars,
        _add_app_and_env(app_name),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer = structlog.dev.ConsoleRenderer() if is_dev else structlog.processors.JSONRenderer()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
