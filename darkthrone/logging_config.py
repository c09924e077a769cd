"""
Logging configuration for the DarkThrone API client.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs for
tracing a single API call across log events.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for the DarkThrone client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module). Names outside
            the ``darkthrone`` namespace are prefixed with it.

    Returns:
        Structured logger instance.
    """
    if name != "darkthrone" and not name.startswith("darkthrone."):
        name = f"darkthrone.{name}"
    return structlog.get_logger(name)


# Convenience functions for the request lifecycle

def log_api_request(
    logger: Any,
    endpoint: str,
    method: str,
    **kwargs: Any,
) -> None:
    """
    Log an outgoing API request before it is dispatched.

    Args:
        logger: Logger instance
        endpoint: Relative API path
        method: HTTP method
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "endpoint": endpoint,
        "method": method,
    }

    log_data.update(kwargs)

    logger.debug("api_request", **log_data)


def log_api_response(
    logger: Any,
    endpoint: str,
    method: str,
    status: int,
    elapsed_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a received API response.

    Args:
        logger: Logger instance
        endpoint: Relative API path
        method: HTTP method
        status: HTTP status code
        elapsed_ms: Round-trip time in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_response",
        "endpoint": endpoint,
        "method": method,
        "status": status,
        "elapsed_ms": elapsed_ms,
    }

    log_data.update(kwargs)

    logger.debug("api_response", **log_data)


def log_api_error(
    logger: Any,
    endpoint: str,
    method: str,
    error: Any,
    **kwargs: Any,
) -> None:
    """
    Log a failed API request.

    Args:
        logger: Logger instance
        endpoint: Relative API path
        method: HTTP method
        error: Exception or message describing the failure
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request_failed",
        "endpoint": endpoint,
        "method": method,
        "error": str(error),
        "error_type": type(error).__name__,
    }

    log_data.update(kwargs)

    logger.error("api_request_failed", **log_data)
