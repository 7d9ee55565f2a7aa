from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from docfmt.core.models import TemplateSource


@runtime_checkable
class TemplateLookupProtocol(Protocol):
    """Read-only view of a template namespace."""

    def get(self, identifier: str) -> Optional[TemplateSource]:
        ...

    def __contains__(self, identifier: object) -> bool:
        ...


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Template language binding used for validation and rendering."""

    def check_syntax(self, identifier: str, text: str, *, path: Optional[Path] = None) -> None:
        """Raise if *text* is not a valid template."""
        ...

    def render(
        self,
        templates: TemplateLookupProtocol,
        identifier: str,
        context: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> str:
        ...
