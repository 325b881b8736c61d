"""
Centralized logging configuration for the stream protocol package.

The protocol layer only emits structured events; applications hosting a
client or server decide how they are rendered by calling configure_logging
once at startup.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..errors import DecodeError


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the hosting application.

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
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

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


def get_codec_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the codec subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for encode/decode events
    """
    return get_logger(name).bind(subsystem="codec")


def log_decode_failure(
    logger: FilteringBoundLogger,
    family: str,
    error: DecodeError,
) -> None:
    """
    Log a rejected inbound message with standardized fields.

    Only the error classification is logged, never the payload itself.

    Args:
        logger: Structlog logger instance
        family: Message family the text was decoded against
        error: The decode error about to be raised to the caller
    """
    logger.debug(
        "Decode rejected",
        family=family,
        kind=error.kind,
        path=error.path,
        reason=str(error),
    )
