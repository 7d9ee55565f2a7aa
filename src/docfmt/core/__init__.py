from __future__ import annotations

"""Public surface for docfmt.core.

This module exposes the shared data model and error taxonomy from a stable
import location:

    from docfmt.core import TemplateSource, Outcome, RegistrationError, ...
"""

from docfmt.core.errors import (
    CollectError,
    ConfigError,
    DataError,
    DocfmtError,
    DuplicateIdentifier,
    InvalidTemplateSource,
    NamingError,
    OutputError,
    RegistrationError,
    RenderError,
    SourceUnreadable,
    UnsupportedDataFormat,
)
from docfmt.core.models import (
    CollectedEntry,
    DataValue,
    DocumentConfig,
    Outcome,
    TemplateSource,
)

__all__ = [
    # Errors
    "CollectError",
    "ConfigError",
    "DataError",
    "DocfmtError",
    "DuplicateIdentifier",
    "InvalidTemplateSource",
    "NamingError",
    "OutputError",
    "RegistrationError",
    "RenderError",
    "SourceUnreadable",
    "UnsupportedDataFormat",
    # Models
    "CollectedEntry",
    "DataValue",
    "DocumentConfig",
    "Outcome",
    "TemplateSource",
]
