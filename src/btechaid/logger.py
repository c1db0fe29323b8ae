"""Logger implementation backed by the standard logging module."""

from __future__ import annotations

import logging
from typing import Any


def _join(messages: tuple[Any, ...]) -> str:
    return " ".join(str(message) for message in messages)


class LoggingLogger:
    """Adapt :class:`~btechaid.interfaces.ILogger` calls onto a stdlib logger.

    Messages are joined with spaces the way a console logger prints them.
    """

    def __init__(self, name: str = "btechaid") -> None:
        self._logger = logging.getLogger(name)

    def log(self, *messages: Any) -> None:
        self._logger.info("%s", _join(messages))

    def error(self, *messages: Any) -> None:
        self._logger.error("%s", _join(messages))

    def warn(self, *messages: Any) -> None:
        self._logger.warning("%s", _join(messages))

    def debug(self, *messages: Any) -> None:
        self._logger.debug("%s", _join(messages))

    def error_with_trace(self, error: BaseException, *messages: Any) -> None:
        self._logger.error("%s", _join(messages), exc_info=error)
