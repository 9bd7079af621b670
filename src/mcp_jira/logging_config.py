"""Logging configuration for MCP Jira.

Records from every ``mcp-jira.*`` logger carry the context of the operation
they were emitted in (see :func:`log_operation`), rendered by the
``%(context)s`` field of the log format.
"""

import logging
import os
import sys
import time
import types
import uuid
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

_operation_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "mcp_jira_operation_context", default=None
)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the context of the operation in progress."""
    return dict(_operation_context.get() or {})


def format_context(context: dict[str, Any] | None) -> str:
    if not context:
        return "no-context"
    # operation=X,trace_id=Y,...
    return ",".join(f"{key}={value}" for key, value in context.items())


class OperationContextFilter(logging.Filter):
    """Attaches the current operation context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_context(_operation_context.get())
        return True


class LoggingContextManager:
    """Context manager that logs the start, end and duration of an operation.

    Nested operations inherit the enclosing context, including its trace ID.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        self.logger = logger
        self.operation = operation
        self.context = {k: v for k, v in context.items() if v is not None}
        self.trace_id: str | None = self.context.get("trace_id")
        self.start_time = 0.0
        self._token: Token[dict[str, Any] | None] | None = None

    def __enter__(self) -> "LoggingContextManager":
        merged = {**get_log_context(), "operation": self.operation, **self.context}
        merged.setdefault("trace_id", str(uuid.uuid4())[:8])
        self.trace_id = merged["trace_id"]
        self._token = _operation_context.set(merged)

        self.start_time = time.perf_counter()
        self.logger.debug(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.perf_counter() - self.start_time
        try:
            if exc_type:
                self.logger.warning(
                    f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
                )
            else:
                self.logger.debug(
                    f"Operation completed: {self.operation} in {duration:.3f}s"
                )
        finally:
            if self._token is not None:
                _operation_context.reset(self._token)
                self._token = None


def setup_logger(
    name: str = "mcp-jira",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Configures the package logger.

    Console output goes to stderr: stdout carries CLI output and the MCP
    stdio transport. Calling this again replaces the handlers it installed.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.), else LOG_LEVEL
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files, else LOG_DIR
        log_format: Log format, else LOG_FORMAT

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(OperationContextFilter())
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_directory / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(OperationContextFilter())
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger
        operation: Name of the operation
        **context: Additional context data; None values are left out

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
