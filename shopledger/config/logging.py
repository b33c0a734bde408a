"""
Structured logging for the ledger service.

Every event carries the service identity (app, version, environment) and,
while a request is in flight, the ledger resource it touches.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from shopledger.config.settings import Settings, get_settings

# Third-party loggers that only add noise at INFO
QUIET_LOGGERS = ("aiosqlite", "uvicorn.access")

LEDGER_CONTEXT_KEYS = ("request_id", "resource", "record_id")


def app_context_processor(settings: Settings) -> Processor:
    """Build a processor stamping the service identity on each event."""
    identity = {
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }

    def add_app_context(
        logger: logging.Logger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in identity.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_app_context


def bind_ledger_context(**values: Any) -> None:
    """Bind request-scoped ledger fields; ``None`` values are skipped."""
    structlog.contextvars.bind_contextvars(
        **{key: value for key, value in values.items() if value is not None}
    )


def clear_ledger_context() -> None:
    structlog.contextvars.unbind_contextvars(*LEDGER_CONTEXT_KEYS)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging from settings."""
    settings = settings or get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        app_context_processor(settings),
    ]

    if settings.environment == "development":
        renderers: list[Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
