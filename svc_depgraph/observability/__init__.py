"""Observability module for structured logging."""

from .logging import configure_logging, get_logger, ScanLogger

__all__ = [
    "configure_logging",
    "get_logger",
    "ScanLogger",
]
