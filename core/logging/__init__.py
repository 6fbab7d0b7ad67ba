"""Structured logging: lazy messages, context fields, JSON-lines files."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, unbind, context, get_context
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "unbind",
    "context",
    "get_context",
    "StructuredLogger",
    "get_logger",
]
