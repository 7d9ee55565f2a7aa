from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from docfmt.core.errors import DocfmtError

# Parsed data files and the render context share this JSON-like shape.
DataValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

T = TypeVar("T")


@dataclass(frozen=True)
class TemplateSource:
    identifier: str
    path: Path
    text: str


@dataclass(frozen=True)
class CollectedEntry:
    """One item produced by the tree collector: a named file or an error."""
    identifier: str | None = None
    path: Path | None = None
    error: DocfmtError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Outcome(Generic[T]):
    """Value plus every error collected while producing it."""
    value: Optional[T] = None
    errors: List[DocfmtError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, error: DocfmtError) -> None:
        self.errors.append(error)

    def extend(self, errors: List[DocfmtError]) -> None:
        self.errors.extend(errors)


@dataclass(frozen=True)
class DocumentConfig:
    """Fully resolved settings for one assembly run."""
    template: Path
    output: Path
    force: bool = False
    follow: bool = False
    strict: bool = False
    verbosity: int = 0
    include: Tuple[Path, ...] = ()
    extensions: Tuple[str, ...] = ("md", "markdown")
    datafiles: Tuple[Path, ...] = ()
    data: Dict[str, Any] = field(default_factory=dict)
