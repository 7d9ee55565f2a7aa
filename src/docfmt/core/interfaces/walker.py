from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Protocol, runtime_checkable

from docfmt.core.models import CollectedEntry


@runtime_checkable
class TreeCollectorProtocol(Protocol):
    """Abstract include-path walker producing named template files."""

    def collect(
        self,
        root: Path,
        extensions: Iterable[str],
        follow_symlinks: bool = False,
    ) -> Iterator[CollectedEntry]:
        """Lazily yield one entry per accepted file, or per failed entry."""
        ...
