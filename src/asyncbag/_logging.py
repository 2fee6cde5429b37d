"""Logging for asyncbag.

Library modules log through ``get_logger`` and never touch handlers. An
application that wants to see bag events calls ``configure_logging`` once;
the stdlib root logger then renders both structlog events and ordinary
``logging`` records through the same structlog renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = ['configure_logging', 'get_logger']


def _timestamped_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Route asyncbag and stdlib logs through one structlog renderer.

    Replaces the handlers of the root logger.

    Args:
        level: Logging level name. Unknown names fall back to INFO.
        json_output: One JSON object per line if True, colored console output otherwise.
        stream: Where to write. Defaults to stderr.
    """
    stream = stream if stream is not None else sys.stderr
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=stream.isatty())
    )

    # Not cached: structlog.testing.capture_logs must be able to swap processors.
    structlog.configure(
        processors=[
            *_timestamped_chain(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_timestamped_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None, **context: Any) -> Any:
    """Get a structlog logger, optionally with context bound to every event.

    Examples:
        >>> log = get_logger(__name__, bag='checkout')
        >>> log.debug('bag.fanout.start', entries=3)
    """
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger
