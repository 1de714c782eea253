"""structlog setup for the converter and CLI.

Events are routed through the standard library so third-party loggers share
the same handler. Development runs get a colored console renderer with the
call site attached; production runs emit one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from nicoass.core.config import Config, get_config

_CALLSITE = [
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp every event with the app name and environment."""
    config = get_config()
    event_dict["app"] = config.app_name
    event_dict["env"] = config.app_env
    return event_dict


def _build_processors(config: Config) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]
    if config.is_development:
        processors.append(structlog.processors.CallsiteParameterAdder(parameters=_CALLSITE))

    if config.is_production:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]
    return processors


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and the root logger.

    Output goes to stderr. ``level`` overrides ``NICOASS_LOG_LEVEL`` and is
    case-insensitive; calling this again reconfigures everything.

    Example:
        >>> setup_logging("debug")
        >>> get_logger(__name__).debug("Lane allocated", lane=3)
    """
    config = get_config()
    level_name = (level or config.log_level).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.getLevelNamesMapping().get(level_name, logging.INFO),
        force=True,
    )
    structlog.configure(
        processors=_build_processors(config),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)
