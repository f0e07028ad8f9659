"""structlog setup for the library and the CLI.

Events are routed through stdlib logging to stderr; stdout carries CLI
results only.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _rename_logger_to_module(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Rename 'logger' key to 'module' for structured log field consistency."""
    if "logger" in event_dict:
        event_dict["module"] = event_dict.pop("logger")
    return event_dict


def _event_processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _rename_logger_to_module,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _build_handler(json_format: bool, stream: TextIO) -> logging.Handler:
    if json_format:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def setup_logging(
    log_level: str = "info", json_format: bool = True, stream: TextIO | None = None
) -> None:
    """Configure structlog for JSON or console output.

    Writes to ``stream``, or to the current ``sys.stderr`` when omitted.
    May be called again to switch level or format; loggers are not cached,
    so module-level ``structlog.get_logger()`` proxies pick up the change.
    """
    structlog.configure(
        processors=_event_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(json_format, stream or sys.stderr))
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
