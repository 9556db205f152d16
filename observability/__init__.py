"""
Grantha - Observability Package

Structlog logging with OpenTelemetry trace context propagation.

Usage:
    from observability import setup_logging, get_logger

    setup_logging()
    logger = get_logger("grantha.cli")
"""
from .logging import (
    LogContext,
    LoggingConfig,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "LogContext",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
