from __future__ import annotations

"""Logging helpers shared by every docfmt component.

All loggers live under the ``docfmt`` namespace. The CLI configures the
base logger once per run from the ``-v`` count and the ``--json-logs``
switch; library callers that never configure it get the standard library
defaults.

Traversal traces (one line per inspected directory entry) are noisy, so
they are only emitted when ``DOCFMT_TRACE_IO=1`` is set in the
environment, on top of DEBUG verbosity.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

BASE_LOGGER = "docfmt"
PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_ENV = "DOCFMT_TRACE_IO"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _utc_timestamp(created: float) -> str:
    ts = datetime.fromtimestamp(created, tz=timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _package_version() -> str:
    # Imported lazily: docfmt/__init__ imports the CLI, which imports this module.
    try:
        from docfmt import __version__
    except ImportError:
        return "unknown"
    return str(__version__)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``ts`` (UTC, millisecond precision), ``level``, ``module`` (the
    logger name), ``msg``, ``version`` and, when the record was logged with
    ``extra={"context": {...}}``, ``ctx``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = _package_version()

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utc_timestamp(record.created),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False, default=str)


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a level: 0 → WARNING, 1 → INFO, 2+ → DEBUG."""
    index = min(max(verbosity, 0), len(_VERBOSITY_LEVELS) - 1)
    return _VERBOSITY_LEVELS[index]


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """(Re)configure the ``docfmt`` logger with a single stream handler.

    Any handler installed by a previous call is replaced, so a run can
    switch level or format after reading its configuration file.
    """
    base = logging.getLogger(BASE_LOGGER)
    for old in list(base.handlers):
        base.removeHandler(old)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    base.setLevel(level)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``docfmt`` or ``docfmt.<name>``."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_ENV) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx: Any) -> None:
    """Debug-log a traversal event when tracing is switched on."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
