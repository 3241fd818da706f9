"""Structured logging setup for the aggregator and its event source."""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: int = logging.INFO, *, json: bool = True) -> None:
    """Configure structlog for the whole process.

    Parameters
    ----------
    level:
        Minimum level that gets rendered, e.g. ``config.logging_level()``.
    json:
        Render one JSON object per line; otherwise use the console renderer.
    """

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
    )
