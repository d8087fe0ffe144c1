"""
Observability module for structured logging.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging for the system."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(indent=2),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class ScanLogger:
    """Logger wrapper for dependency scan events."""

    def __init__(self, component: str):
        self.logger = get_logger(f"scan.{component}")
        self.component = component

    def log_file_scanned(self, path: Path | str, references: int) -> None:
        """Log a single source file that was read and matched."""
        self.logger.debug(
            "file_scanned",
            path=str(path),
            references=references,
        )

    def log_repository_scanned(self, name: str, files: int, modules: int) -> None:
        """Log the end of one repository pass."""
        self.logger.info(
            "repository_scanned",
            repository=name,
            files=files,
            modules=modules,
        )

    def log_package_scanned(self, name: str, files: int, modules: int, dropped: int) -> None:
        """Log the end of one local package pass."""
        self.logger.info(
            "package_scanned",
            package=name,
            files=files,
            modules=modules,
            self_references_dropped=dropped,
        )

    def log_diagram_written(self, path: Path | str, size: int) -> None:
        """Log the rendered diagram landing on disk."""
        self.logger.info(
            "diagram_written",
            path=str(path),
            bytes=size,
        )

    def log_error(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        """Log an error that aborted the run."""
        self.logger.error(
            "scan_error",
            component=self.component,
            error_type=type(error).__name__,
            error_message=str(error),
            context=context or {},
            exc_info=error,
        )
