"""Route timetype's log records through structlog.

The value modules only ever call ``logging.getLogger(__name__)``; they stay
silent until an application calls :func:`configure_logging`.  After that,
stdlib records and structlog events share one stderr handler and one
renderer: readable console lines, or one JSON object per line when
``log_json`` is on.
"""

from __future__ import annotations

import logging
import sys

import structlog

from timetype.config.settings import TimetypeSettings

# Third-party loggers held at WARNING even in verbose mode.
QUIET_LOGGERS = ("sqlalchemy",)


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Install the stderr handler and set logger levels.

    Safe to call more than once; each call replaces the root handler.

    Args:
        verbose: Let DEBUG records from ``timetype.*`` through.  Falls back
            to ``TIMETYPE_VERBOSE``.
        log_json: Emit JSON lines.  Falls back to ``TIMETYPE_LOG_JSON``.
    """
    if verbose is None or log_json is None:
        settings = TimetypeSettings()
        if verbose is None:
            verbose = settings.verbose
        if log_json is None:
            log_json = settings.log_json

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("timetype").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
