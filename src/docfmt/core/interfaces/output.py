from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputWriterProtocol(Protocol):
    """Writes the assembled document; reports refusal as False, never raises."""

    def write(self, path: Path, content: str) -> bool:
        ...
