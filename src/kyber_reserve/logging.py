"""
Structured logging configuration using Loguru.

Every sink, console or file, writes the same JSON line when the json format
is selected. Records emitted inside `trace_context` carry a trace_id; the
facade opens one per forwarded call so routing and transaction logs line up.
"""

import json
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Optional

from loguru import logger

from kyber_reserve.config import settings

# Key under which the rendered JSON line is stashed for the sink template
_SERIALIZED = "serialized"

_trace_id: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)

logger.remove()


def serialize(record: Dict[str, Any]) -> str:
    """Render a log record as one JSON object."""
    payload = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "service": settings.service_name,
        "message": record["message"],
        "module": record["extra"].get("module", record["module"]),
        "function": record["function"],
        "line": record["line"],
    }
    payload.update(
        (key, value)
        for key, value in record["extra"].items()
        if key not in payload and key != _SERIALIZED
    )

    if record["exception"] is not None:
        payload["exception"] = {
            "type": record["exception"].type.__name__,
            "value": str(record["exception"].value),
        }

    return json.dumps(payload, default=str)


def format_json(record: Dict[str, Any]) -> str:
    """Loguru format callable emitting `serialize(record)` verbatim."""
    record["extra"][_SERIALIZED] = serialize(record)
    return "{extra[" + _SERIALIZED + "]}\n"


def format_text(record: Dict[str, Any]) -> str:
    """Format log record for console output."""
    template = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
    if "trace_id" in record["extra"]:
        template += " | <yellow>{extra[trace_id]}</yellow>"
    template += " - <level>{message}</level>\n"
    if record["exception"] is not None:
        template += "{exception}\n"
    return template


def configure_logging():
    """(Re)install sinks from `settings.monitoring`."""
    monitoring = settings.monitoring
    logger.remove()

    if monitoring.log_format == "json":
        logger.add(sys.stdout, format=format_json, level=monitoring.log_level, colorize=False)
    else:
        logger.add(sys.stdout, format=format_text, level=monitoring.log_level, colorize=True)

    if monitoring.log_file:
        logger.add(
            monitoring.log_file,
            format=format_json,
            level=monitoring.log_level,
            rotation="100 MB",
            retention="7 days",
            compression="gz",
        )


@contextmanager
def trace_context(trace_id: Optional[str] = None):
    """Tag all logs within the context with a trace_id.

    Without an explicit id, an enclosing trace is reused, otherwise a new
    one is generated.
    """
    if trace_id is None:
        trace_id = _trace_id.get() or str(uuid.uuid4())

    token = _trace_id.set(trace_id)
    try:
        with logger.contextualize(trace_id=trace_id):
            yield trace_id
    finally:
        _trace_id.reset(token)


def get_logger(name: str):
    """Get a logger instance bound to the given module name."""
    return logger.bind(module=name)


configure_logging()


__all__ = ["logger", "get_logger", "trace_context", "configure_logging", "serialize"]
