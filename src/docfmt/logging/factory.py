from __future__ import annotations

import logging
from typing import Optional, TextIO

from docfmt.core.interfaces import LoggerFactoryProtocol
from docfmt.logging.helpers import get_logger, level_for_verbosity, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Factory that configures and returns project-scoped loggers.

    This implementation delegates base configuration to `setup_base_logger`
    in order to keep behavior centralized.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: int = logging.WARNING,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def for_verbosity(cls, verbosity: int, *, json_logs: bool = False, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        return cls(json_logs=json_logs, level=level_for_verbosity(verbosity), stream=stream)

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
