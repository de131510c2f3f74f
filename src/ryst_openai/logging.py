"""Structured logging with per-call request_id correlation."""
import logging
import sys
import uuid
from typing import Any

import structlog

API_KEY_FIELDS = ("api_key", "authorization")


def new_request_id() -> str:
    return str(uuid.uuid4())


def drop_secrets(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that removes credentials accidentally passed as log fields."""
    for key in API_KEY_FIELDS:
        if key in event_dict:
            event_dict[key] = "***"
    return event_dict


def configure_logging(json_logs: bool = True, level: str | int = "INFO") -> None:
    """Configure structlog for JSON or console output."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        drop_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
