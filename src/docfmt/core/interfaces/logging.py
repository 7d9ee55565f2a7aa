from __future__ import annotations

"""Logging seams.

Components log through whatever the caller injects; `logging.Logger`
satisfies `LoggerLikeProtocol` and `DefaultLoggerFactory` satisfies
`LoggerFactoryProtocol`.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The four levels docfmt components emit at."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures logging on first use and hands out ``docfmt.*`` loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
