from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable

from docfmt.core.models import DataValue


@runtime_checkable
class DataReaderProtocol(Protocol):
    """Parses the text of one data file into a DataValue."""

    def parse(self, text: str, *, path: Path) -> DataValue:
        ...


@runtime_checkable
class DataReaderRegistryProtocol(Protocol):
    def for_path(self, path: Path) -> DataReaderProtocol:
        """Return the reader for *path* or raise UnsupportedDataFormat."""
        ...
