"""
CinePrompt Logging Configuration
Structured logging with a correlation ID per CLI invocation, using structlog.
Log lines go to stderr; stdout is reserved for command output.
"""

import logging
import sys
import uuid
import structlog
from typing import Any, Optional
from contextvars import ContextVar

from cineprompt.core.config import get_settings


correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    correlation_id_var.set(correlation_id)


def add_correlation_id(
    logger: Any, method_name: str, event_dict: dict
) -> dict:
    """Add correlation ID to log event."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def start_invocation(command: str) -> str:
    """
    Open the logging context for one CLI command.
    Returns the new correlation ID; every event logged afterwards carries it
    along with the command name.
    """
    correlation_id = f"cli-{uuid.uuid4()}"
    set_correlation_id(correlation_id)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command)
    return correlation_id


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structured logging for the CLI.

    Args:
        level: Overrides CINEPROMPT_LOG_LEVEL (e.g. "DEBUG" for --verbose)
    """
    settings = get_settings()
    log_level = level or settings.log_level

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_correlation_id,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if settings.debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
    )
    logging.getLogger("cineprompt").setLevel(getattr(logging, log_level))
    # supabase's HTTP stack logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
