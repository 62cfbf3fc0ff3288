from __future__ import annotations

import logging
import sys
from typing import Any

import orjson
import structlog


def _json_serializer(obj: Any, default: Any) -> str:
    """
    JSON serializer for structured logs.

    orjson keeps key order stable, so identical runs log identical lines.
    """
    return orjson.dumps(obj, default=default).decode("utf-8")


def build_renderer(env: str) -> Any:
    """
    Final processor for the given environment.

    Local development gets readable key=value lines; staging and prod
    get one JSON document per line for log shipping.
    """
    if env == "local":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer(serializer=_json_serializer)


def configure_logging(*, level: str = "INFO", env: str = "prod") -> None:
    """
    Configure structured logging for the process.

    Library code (engine, cursors) only obtains loggers; call this once
    from the application entry point.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        # Merge context variables (component, dimensions, etc.)
        structlog.contextvars.merge_contextvars,

        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),

        structlog.processors.StackInfoRenderer(),
    ]
    if env != "local":
        # ConsoleRenderer formats exceptions itself
        processors += [structlog.processors.format_exc_info, structlog.processors.dict_tracebacks]
    processors.append(build_renderer(env))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    # Route stdlib logging (fastapi, starlette) to the same stream
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def bind_context(**values: Any) -> None:
    """
    Bind contextual information to all future log entries.

    Example:
        bind_context(component="api.zip", dimensions=3)
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
