from __future__ import annotations

import logging
import os
from typing import Any

import structlog

SERVICE_NAME = "krishi-sadhan"

# uvicorn の access log は request_id middleware の http_request と重複する
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def _get_log_level() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level, logging.INFO)


def _add_service(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _resolve_format() -> str:
    # dev defaults to the console renderer unless LOG_FORMAT is set explicitly
    if "LOG_FORMAT" in os.environ:
        return os.environ["LOG_FORMAT"].lower()
    return "console" if os.getenv("APP_ENV", "dev") == "dev" else "json"


def setup_logging() -> None:
    """Configure structlog and stdlib logging to share one renderer.

    Every line carries an ISO/UTC timestamp, level, event, the service name
    and any contextvars bound for the current request (request_id, path,
    method).
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if _resolve_format() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    logging.basicConfig(level=_get_log_level(), handlers=[handler], force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, _get_log_level()))
