"""Structured logging configuration using structlog."""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger.json import JsonFormatter

from aws_messaging.config.settings import settings


def add_operation_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add [operation] prefix to log message if an operation is bound.

    Runs before the renderer so the prefix shows up in both JSON and
    console output.
    """
    operation = event_dict.get("operation")
    if operation:
        current_event = event_dict.get("event", "")
        event_dict["event"] = f"[{operation}] {current_event}"
    return event_dict


def configure_logging() -> None:
    """Configure structlog for the scripts.

    Logs go to stderr; stdout carries the printed AWS response.
    """
    log_level = getattr(logging, settings.logging.level)

    handler = logging.StreamHandler(sys.stderr)
    if settings.logging.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Silence noisy SDK loggers
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            add_operation_prefix,
            structlog.processors.JSONRenderer()
            if settings.logging.format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)
