"""Logging configuration for the UMD dump inspector."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

ENVIRONMENT_VARIABLE = "UMD_INSPECTOR_ENV"


class LoggingService:
    """Service for configuring structlog on top of the standard logging module."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Path | None = None,
        stream: Any = None,
    ) -> None:
        """Initialize the logging service.

        Args:
            log_level: The minimum log level to capture
            log_dir: Directory for log files (None for console only)
            stream: Console stream; defaults to stderr so stdout stays
                free for command output
        """
        self.log_level = log_level.upper()
        self.log_dir = log_dir
        self.stream = stream
        self.is_development = os.getenv(ENVIRONMENT_VARIABLE, "development") == "development"

    def configure(self) -> None:
        """Configure structlog with appropriate processors and handlers."""
        self._configure_stdlib_logging()

        structlog.configure(
            processors=self._get_processors(),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

    def _configure_stdlib_logging(self) -> None:
        """Configure standard library logging handlers."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        numeric_level = getattr(logging, self.log_level, logging.INFO)
        root_logger.setLevel(numeric_level)

        console_handler = logging.StreamHandler(self.stream or sys.stderr)
        console_handler.setLevel(numeric_level)
        if self.is_development:
            console_handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            ))
        else:
            console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

        if self.log_dir:
            self._setup_file_logging(root_logger, numeric_level)

    def _setup_file_logging(self, root_logger: logging.Logger, level: int) -> None:
        """Set up rotating file logs in the log directory."""
        if not self.log_dir:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter("%(message)s")

        file_handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / "inspector.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / "error.log",
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        root_logger.addHandler(error_handler)

    def _get_processors(self) -> list[Any]:
        """Get the structlog processor chain for the environment."""
        common_processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        # Files always get JSON; the console only gets colors in development
        if self.is_development and not self.log_dir:
            return common_processors + [structlog.dev.ConsoleRenderer(colors=False)]
        return common_processors + [structlog.processors.JSONRenderer()]

    def get_logger(self, name: str | None = None) -> structlog.stdlib.BoundLogger:
        """Get a configured logger instance."""
        return structlog.stdlib.get_logger(name)


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    environment: str | None = None,
    stream: Any = None,
) -> LoggingService:
    """Set up application logging with the specified configuration.

    Args:
        log_level: Minimum log level to capture
        log_dir: Directory for log files (None for console only)
        environment: Environment name (development/production)
        stream: Console stream override

    Returns:
        Configured LoggingService instance
    """
    if environment:
        os.environ[ENVIRONMENT_VARIABLE] = environment

    service = LoggingService(log_level=log_level, log_dir=log_dir, stream=stream)
    service.configure()
    return service
