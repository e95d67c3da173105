"""
Structured logging for the print service using structlog.

Every event carries the service name and environment. Print job code binds
the job ID into the context so nested log calls inherit it.
"""

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any

import structlog
from labelhub import __version__
from labelhub.config import settings

SERVICE_NAME = "labelhub"


def add_service_info(logger: Any, method_name: str, event_dict: dict) -> dict:
    """structlog processor: stamp service, version and environment."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", __version__)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def configure_logging() -> None:
    """
    Configure structlog on top of stdlib logging.

    Development gets the console renderer; staging and production get
    one JSON object per line.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper())
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development:
        renderer = [structlog.dev.ConsoleRenderer()]
    else:
        renderer = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger for a module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Print job stored", extra={"job_id": job_id})
    """
    return structlog.get_logger(name)


def bind_job_context(job_id: str) -> AbstractContextManager:
    """
    Bind a print job ID to every log event inside the ``with`` block.

    Example:
        >>> with bind_job_context(job_id):
        ...     logger.info("Print sheet built")  # carries job_id
    """
    return structlog.contextvars.bound_contextvars(job_id=job_id)


configure_logging()
