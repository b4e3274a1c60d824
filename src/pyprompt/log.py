from __future__ import annotations
from collections.abc import Mapping
import logging
import os
import sys
import structlog


def debug_requested(env: Mapping[str, str] | None = None) -> bool:
    """Return `True` iff :envvar:`PYPROMPT_DEBUG` is set to a non-empty value"""
    if env is None:
        env = os.environ
    return bool(env.get("PYPROMPT_DEBUG"))


def configure_logging(debug: bool = False) -> None:
    """
    Send log events to stderr as plain text, as stdout is reserved for the
    prompt itself.  Only warnings and errors are shown unless ``debug`` is
    true.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
