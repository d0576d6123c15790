"""structlog setup for the engine.

The engine is a library: it never configures logging on import. Host
applications call ``configure_logging()`` once, or wire structlog themselves.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any

import orjson
import structlog
from structlog.types import Processor

from retirement_engine.core.config import settings

# Set by compare_vehicles for the duration of one run
scenario_id_ctx: ContextVar[str | None] = ContextVar("scenario_id", default=None)


def _add_context_vars(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag events emitted inside a comparison run with its scenario id."""
    if scenario_id := scenario_id_ctx.get():
        event_dict["scenario_id"] = scenario_id
    return event_dict


def _orjson_serializer(obj: Any, **kwargs: Any) -> str:
    # Engine amounts are Decimal; log them as exact strings
    return orjson.dumps(obj, default=str).decode("utf-8")


def _use_json_renderer() -> bool:
    if settings.log_format is not None:
        return settings.log_format == "json"
    return settings.environment != "development"


def configure_logging() -> None:
    """Install the engine's structlog processor chain.

    JSON lines (orjson, ``message`` key) when ``log_format`` is json or the
    environment is not development; colored console output otherwise.
    Level is DEBUG when ``settings.debug`` is set, so the per-sweep
    ``sensitivity_sweep_complete`` events only show up in debug runs.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_context_vars,
    ]

    if _use_json_renderer():
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=_orjson_serializer),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if settings.debug else logging.INFO,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for an engine module."""
    return structlog.get_logger(name)
