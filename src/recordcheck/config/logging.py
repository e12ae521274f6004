"""structlog setup for the recordcheck CLI.

Application logs and CLI results never share a stream: results go to
stdout (or stderr on failure) through :mod:`recordcheck.output`, log
lines always go to stderr. stdlib loggers obtained with
``logging.getLogger(__name__)`` are rendered by the same structlog
processor chain as ``structlog.get_logger()`` loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "recordcheck"

# Third-party loggers kept at WARNING even with --verbose.
_NOISY_LOGGERS = ("pluggy",)


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all recordcheck logging through one structlog-formatted handler.

    Args:
        verbose: Show DEBUG records from recordcheck. Wins over *quiet*.
        quiet: Only show ERROR records (plugin warnings are hidden).
        log_json: Emit JSON lines instead of the console renderer.
        stream: Destination, ``sys.stderr`` when omitted.

    Safe to call repeatedly; the root handler is replaced, not stacked.
    """
    out = stream if stream is not None else sys.stderr
    shared = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(_level_for(verbose=verbose, quiet=quiet))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
