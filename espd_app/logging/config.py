"""
Centralized logging configuration for the ESPD import engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_import_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the criterion import subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for tree walking and field assignment
    """
    return get_logger(name).bind(subsystem="criterion_import")


def log_recovered_issue(
    logger: FilteringBoundLogger,
    issue: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a recovered data quality fault with standardized format.

    Faults whose class declares ``level = "error"`` are logged at error
    level, everything else at warning level.

    Args:
        logger: Structlog logger instance
        issue: The recovered exception
        context: Additional context data
    """
    bound_logger = logger.bind(
        error_type=type(issue).__name__,
        error=str(issue),
    )

    issue_context = dict(getattr(issue, "context", {}) or {})
    if context:
        issue_context.update(context)
    if issue_context:
        bound_logger = bound_logger.bind(context=issue_context)

    if getattr(issue, "level", "warning") == "error":
        bound_logger.error("Recovered import fault")
    else:
        bound_logger.warning("Recovered import fault")
