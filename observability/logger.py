"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import re
import sys

import structlog

_APIKEY_IN_TEXT = re.compile(r"(apikey=)[^&\s\"']*", re.IGNORECASE)


def mask_api_keys(_logger, _method_name: str, event_dict: dict) -> dict:
    """Last line of defence: mask any ``apikey=...`` left in string values."""
    for key, value in event_dict.items():
        if isinstance(value, str) and "apikey=" in value.lower():
            event_dict[key] = _APIKEY_IN_TEXT.sub(r"\1REDACTED", value)
    return event_dict


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog for the client and its command line tool.

    Logs go to stderr so command output on stdout stays clean.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_api_keys,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
