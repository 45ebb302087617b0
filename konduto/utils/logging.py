"""
Logging utilities for the Konduto SDK.

The SDK logs its own diagnostics straight to loguru. Callers who want to
observe every API request install a sink with ``konduto.set_logger``.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class Logger(Protocol):
    """Sink receiving request lifecycle events."""

    def info(self, message: str, context: Mapping[str, Any]) -> None:
        ...

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        ...


class NullLogger:
    """Logger that discards everything. Installed by default."""

    def info(self, message: str, context: Mapping[str, Any]) -> None:
        pass

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        pass


class LoguruLogger:
    """Forward request events to loguru, with the context bound as extras."""

    def __init__(self, name: str = "konduto"):
        self._logger = logger.bind(name=name)

    def info(self, message: str, context: Mapping[str, Any]) -> None:
        self._logger.bind(**_sanitize(context)).info(message)

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        self._logger.bind(**_sanitize(context)).error(message)


def _sanitize(context: Mapping[str, Any]) -> dict[str, Any]:
    # Exceptions are rendered as text so sinks can serialize the record
    return {
        key: repr(value) if isinstance(value, BaseException) else value
        for key, value in context.items()
    }


class SafeLogger:
    """
    Best-effort wrapper around a user sink.

    A failing sink must never change the outcome of an API call, so any
    exception raised by it is reported through loguru and dropped.
    """

    def __init__(self, sink: Logger):
        self.sink = sink

    def info(self, message: str, context: Mapping[str, Any]) -> None:
        try:
            self.sink.info(message, context)
        except Exception as e:
            logger.opt(exception=e).debug("Konduto logger sink failed on info: {}", message)

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        try:
            self.sink.error(message, context)
        except Exception as e:
            logger.opt(exception=e).debug("Konduto logger sink failed on error: {}", message)

