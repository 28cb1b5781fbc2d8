"""
Structured logging utilities for the HuleEdu REST client, built on structlog.

Key Features:
- Async-safe context management with contextvars
- Service context processor aligned with OpenTelemetry field names
- Environment-based output formatting (console or JSON)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add service.name and deployment.environment fields to every log record.

    Args:
        logger: The logger instance (unused but required by structlog)
        method_name: The logging method name (unused but required by structlog)
        event_dict: The log event dictionary to enrich

    Returns:
        Enriched event dictionary with service context fields
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def build_processors(use_json: bool) -> list[Processor]:
    """Return the structlog processor chain for the chosen output format."""
    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    return processors


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog and stdlib logging for a service using the client.

    Args:
        service_name: Name of the service (e.g., "huleedu-rest-client")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")

    Environment Variables:
        LOG_FORMAT: "json" for JSON, "console" for human-readable (default: console,
            JSON in production)
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=build_processors(use_json),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "api_client", "auth_repository")

    Returns:
        A structlog BoundLogger instance
    """
    logger = structlog.get_logger()

    if name:
        logger = logger.bind(logger_name=name)

    return logger
