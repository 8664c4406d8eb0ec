"""Structured console logging.

structlog-backed implementation of LoggerProtocol. The container builds one
adapter per process; children created with bind() share its configuration.

Rendering:
    use_json=False  colored key/value lines for local development
    use_json=True   one JSON object per line for log shipping

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger


def flatten_enums(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Replace enum members (roles, actions, reasons) with their values."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _with_exception(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger backed by structlog.

    Args:
        use_json: Render JSON lines instead of colored console output.
        level: Minimum level name; unknown names fall back to INFO.
        stream: Output stream. Defaults to stdout.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                flatten_enums,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR, flattening an optional exception into two fields.

        Args:
            message: Event name.
            error: Exception whose type and text are added as error_type
                and error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_exception(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_exception(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a child adapter carrying extra context on every line.

        Args:
            **context: Context bound to the child.

        Returns:
            ConsoleAdapter: New adapter; this one is unchanged.
        """
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
