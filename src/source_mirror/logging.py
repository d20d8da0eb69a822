"""Opinionated JSON logging configuration for the source mirror."""

import logging
import sys
from typing import Any, Dict, Optional

import structlog


def configure_logging(
    level: str = "INFO",
    service_name: Optional[str] = None,
    structured: bool = True,
) -> None:
    """Configure logging for the mirror and its host process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        service_name: Name of the service, bound to every structured record
        structured: Whether to render records as JSON
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if service_name:
        processors.insert(0, _bind_service(service_name))
    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    # GitPython is chatty at DEBUG
    logging.getLogger("git").setLevel(max(log_level, logging.INFO))


def _bind_service(service_name: str):
    """Build a processor that stamps every record with the service name.

    Args:
        service_name: Value stored under the ``service`` key

    Returns:
        structlog processor
    """
    def processor(_logger: Any, _method: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict
    return processor


def get_logger(name: str, **context: Any) -> Any:
    """Get a logger instance with optional context.

    Args:
        name: Logger name
        **context: Additional context to bind to the logger

    Returns:
        Configured structlog logger
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
