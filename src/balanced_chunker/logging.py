"""Structured logging configuration for balanced-chunker."""

from __future__ import annotations

import logging
import sys
import typing

import structlog

_handler: logging.Handler | None = None


def configure_logging(
    level: int | str = logging.WARNING,
    json_format: bool = False,
    stream: typing.TextIO | None = None,
) -> None:
    """Route standard library logging through structlog renderers.

    The chunking modules log through ``logging.getLogger(__name__)``; this
    function decides how those records are rendered. Calling it again
    replaces the handler installed by the previous call.

    Args:
        level: Logging level (e.g., logging.DEBUG, "INFO").
        json_format: Whether to output logs in JSON format. If False, uses
            ConsoleRenderer for human-readable output.
        stream: Where to write log lines. Defaults to stderr so that chunk
            output on stdout stays machine-readable.
    """
    global _handler

    if isinstance(level, str):
        level = level.upper()

    shared_processors: list[typing.Callable] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        # Records from logging.getLogger() have not been through the chain yet
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    _handler = handler
