from __future__ import annotations

"""Exception taxonomy shared by every docfmt component.

Each error keeps the offending ``path`` and the underlying ``cause`` so the
CLI can report *where* and *why* something failed without re-raising.
"""

from pathlib import Path
from typing import Optional


class DocfmtError(Exception):
    """Base class for all docfmt failures."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        parts = [self.message]
        if self.path is not None:
            parts.append(f"[{self.path}]")
        if self.cause is not None:
            parts.append(f"({self.cause})")
        return " ".join(parts)


class NamingError(DocfmtError):
    """A path segment could not be turned into identifier text."""


class CollectError(DocfmtError):
    """A directory entry could not be inspected during traversal."""


class RegistrationError(DocfmtError):
    """A template source could not be added to the registry."""


class DuplicateIdentifier(RegistrationError):
    def __init__(self, identifier: str, *, path: Optional[Path] = None, existing: Optional[Path] = None) -> None:
        msg = f"duplicate template identifier {identifier!r}"
        if existing is not None:
            msg += f" (already registered from {existing})"
        super().__init__(msg, path=path)
        self.identifier = identifier
        self.existing = existing


class SourceUnreadable(RegistrationError):
    """Template file missing, unreadable or not UTF-8."""


class InvalidTemplateSource(RegistrationError):
    """Template file was read but the engine rejected its syntax."""


class DataError(DocfmtError):
    """A data file could not be opened, decoded or parsed."""


class UnsupportedDataFormat(DataError):
    def __init__(self, path: Path) -> None:
        super().__init__("unsupported data file extension", path=path)


class RenderError(DocfmtError):
    """Rendering failed (unknown identifier or strict-mode lookup)."""


class OutputError(DocfmtError):
    """The output file could not be written."""


class ConfigError(DocfmtError):
    """Configuration is incomplete, unreadable or invalid."""
