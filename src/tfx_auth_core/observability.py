"""Logging setup and context helpers built on structlog.

Logs go to stderr so that command output on stdout stays clean.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def _stderr_logger_factory(*_args: object) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so that redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(log_level: str = "INFO", dev_mode: bool = False) -> None:  # noqa: FBT001, FBT002
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
        dev_mode: Render human readable console output instead of JSON lines.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level, format="%(message)s", stream=sys.stderr, force=True
    )

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer()
        if dev_mode
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


@contextmanager
def log_bind(**kwargs: object) -> Iterator[None]:
    """Bind key/value pairs to every log entry emitted inside the block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
