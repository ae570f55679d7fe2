"""
Logging Setup

Configures structlog for either human-readable or JSON output. Records are
written to stderr so stdout stays reserved for program output.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Union

import structlog  # type: ignore[import-untyped]


class LogRenderer(str, Enum):
    """Log output formats."""
    CONSOLE = "console"
    JSON = "json"


def _timestamp_processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add timestamp in human-readable format."""
    event_dict["timestamp"] = datetime.now(timezone.utc).strftime("%H:%M:%S")
    return event_dict


def configure_logging(
    level: str = "INFO",
    renderer: Union[LogRenderer, str] = LogRenderer.CONSOLE,
) -> None:
    """
    Configure structlog.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        renderer: Console (human-readable) or JSON output
    """
    renderer = LogRenderer(renderer)
    if renderer is LogRenderer.JSON:
        processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            _timestamp_processor,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
