"""
Structured logging for the live-blog content API.

structlog runs on top of stdlib logging so that uvicorn, SQLAlchemy and
asyncpg records share one formatter with our own event-style entries
(``content_assembly_failed``, ``http_request`` ...).
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from shared.config import Environment, Settings, get_settings

# Access lines duplicate RequestLoggingMiddleware; driver chatter is per query.
_NOISY_LOGGERS = ("uvicorn.access", "asyncpg", "sqlalchemy.pool", "asyncio")


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.environment == Environment.DEV:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(service_name: str, extra_context: dict[str, Any] | None = None) -> None:
    """
    Configure structured logging for a process.

    Args:
        service_name: Bound as ``service`` on every entry (e.g. "content-api").
        extra_context: Additional static fields bound to every entry.

    With ``LB_DEBUG`` set, SQL statements echoed by the engine stay visible;
    otherwise ``sqlalchemy.engine`` is held at WARNING with the other
    noisy loggers.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings),
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    noisy = _NOISY_LOGGERS if settings.debug else (*_NOISY_LOGGERS, "sqlalchemy.engine")
    for name in noisy:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.contextvars.clear_contextvars()
    bound: dict[str, Any] = {
        "service": service_name,
        "instance_id": settings.instance_id,
        "environment": settings.environment.value,
    }
    if extra_context:
        bound.update(extra_context)
    structlog.contextvars.bind_contextvars(**bound)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger."""
    return structlog.get_logger(name)
