"""structlog configuration for typewise.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (``log_json``): structured JSON lines to stderr

Library modules log through stdlib loggers under ``typewise``; the
``ProcessorFormatter`` renders those records through the same structlog
pipeline. Every record the library emits is a DEBUG event:
- ``typewise.services.assertions``: a failed assertion, before it raises
- ``typewise.services.combinators``: a rejected predicate list or value list
- ``typewise.domain.detect``: a rejected boxed primitive

Classification itself is silent, so nothing is written unless ``verbose``
is set.
"""

from __future__ import annotations

import logging
import sys

import structlog

from typewise.config.settings import TypewiseSettings


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Arguments left as None are read from ``TypewiseSettings``.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if verbose is None or log_json is None:
        settings = TypewiseSettings()
        verbose = settings.verbose if verbose is None else verbose
        log_json = settings.log_json if log_json is None else log_json

    typewise_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("typewise").setLevel(typewise_level)
