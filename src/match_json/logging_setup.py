import logging
import sys
import os
from typing import Any, Optional, Protocol, TextIO

import structlog
from structlog.types import FilteringBoundLogger


class DiagnosticSink(Protocol):
    """Anything the converter can report diagnostics to.

    structlog loggers satisfy this; tests pass a recorder instead.
    """

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


def configure_logging(
    level: str = "INFO",
    format_type: str = "json",
    structured: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: "json" for machine-readable logs, "human" for dev
        structured: Whether to add call-site processors
        stream: Where log lines go. Defaults to stderr because stdout
            carries the converted document.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    is_dev = format_type == "human" or os.getenv("MATCH_JSON_LOG_HUMAN", "").lower() in (
        "1",
        "true",
        "yes",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if structured:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    if is_dev:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "match_json") -> FilteringBoundLogger:
    """Get a structured logger instance.

    Examples:
        log = get_logger(__name__)
        log.info("Conversion completed", total="85")
        log.warning("Invalid score value encountered", score="abc")
    """
    return structlog.get_logger(name)
