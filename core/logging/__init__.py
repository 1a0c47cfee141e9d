"""Structured logging: bootstrap, context binding, formatters."""
from .config import bootstrap_logging, shutdown_logging
from .context import context
from .logger import get_logger, StructuredLogger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_logger",
    "StructuredLogger",
]
