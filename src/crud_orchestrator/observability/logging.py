"""
crud_orchestrator.observability.logging

Logging for a library layer that is embedded in someone else's process.

Responsibilities:
- Hand out structlog loggers that sit on stdlib loggers, so nothing is
  emitted until the host configures `logging`.
- Configure structlog from `Settings` when the host opts in via
  `bootstrap.configure`: readable console output in dev, JSON elsewhere.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from crud_orchestrator.settings import Settings

# Silent unless the host attaches handlers.
logging.getLogger("crud_orchestrator").addHandler(logging.NullHandler())


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=build_processors(settings),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_processors(settings: Settings) -> list[Any]:
    """
    Processor chain for `settings`. The renderer is picked by `settings.env`:
    `dev` gets `ConsoleRenderer`, `test` and `prod` get one JSON object per line.
    """
    renderer: Any
    if settings.env == "dev":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context(settings),
        structlog.processors.dict_tracebacks,
        renderer,
    ]


def add_service_context(settings: Settings):
    # Tags each event with the embedding service and its environment; explicit fields win.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", settings.service_name)
        event_dict.setdefault("env", settings.env)
        return event_dict

    return processor


def get_logger(name: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Logger for `name` with `context` bound to every event, e.g.
    `get_logger(__name__, entity="Pos")`.

    The processor chain is resolved on first use, so loggers created before
    `configure_logging` still pick up the host's configuration.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **context,
    )
