"""Structured logging with request_id/trace_id correlation."""
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


def get_request_id() -> str:
    return request_id_var.get() or ""


def get_trace_id() -> str:
    return trace_id_var.get() or ""


def set_request_context(request_id: str | None = None, trace_id: str | None = None) -> None:
    request_id_var.set(request_id or str(uuid.uuid4()))
    trace_id_var.set(trace_id or request_id_var.get() or str(uuid.uuid4()))


def clear_request_context() -> None:
    request_id_var.set("")
    trace_id_var.set("")


def add_request_context(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to inject request_id and trace_id into log events."""
    rid = get_request_id()
    tid = get_trace_id()
    if rid:
        event_dict.setdefault("request_id", rid)
    if tid:
        event_dict.setdefault("trace_id", tid)
    return event_dict


def configure_logging(
    json_logs: bool = True, level: str = "INFO", stream: TextIO | None = None
) -> None:
    """Configure structlog for JSON output and request correlation.

    stream defaults to stdout; stdio-based servers must pass stderr.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=True,
    )
