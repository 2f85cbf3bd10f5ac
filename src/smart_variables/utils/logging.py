"""Structured logging with structlog + rich.

Log lines go to stderr so that CLI output on stdout stays clean.
"""

from __future__ import annotations

import logging

import structlog
from rich.console import Console

from smart_variables.config import settings

_console = Console(stderr=True)


def _stderr_logger_factory(*args: object) -> structlog.PrintLogger:
    # Resolved on every call; the host (test runner, CLI runner) may swap sys.stderr.
    return structlog.PrintLogger(_console.file)


def setup_logging(level: str | None = None) -> None:
    """Configure structlog for the entire application.

    *level* overrides ``LOG_LEVEL`` for this process (the CLI quietens to
    ``WARNING`` unless asked otherwise).
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(
                colors=_console.is_terminal,
                exception_formatter=structlog.dev.rich_traceback,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named logger."""
    return structlog.get_logger(name)


def truncate_for_log(value: str, max_chars: int) -> str:
    """Shorten prompts and model output before they are logged."""
    if max_chars <= 0 or len(value) <= max_chars:
        return value
    return f"{value[:max_chars]}... <truncated {len(value) - max_chars} chars>"
