# src/docfmt/utils/paths.py
"""
paths – Template identifier derivation for docfmt.

Provides:
  • name_of(root, file)        – identifier of a file found under an include dir
  • single_file_name(file)     – identifier of an explicitly included file
  • check_extension(file)      – reject extensions that are not valid UTF-8
  • is_hidden_name(path)       – leaf-stem dot detection
  • supports_symlinks()        – whether follow mode has any meaning here

Naming never decides exclusion: callers check `is_hidden_name` first.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from docfmt.core.errors import NamingError


def _check_text(part: str, file: PurePath) -> str:
    # Undecodable bytes surface as lone surrogates (surrogateescape).
    try:
        part.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise NamingError("path is not valid UTF-8", path=file, cause=exc) from exc
    return part


def name_of(root: PurePath, file: PurePath) -> str:
    """Return the identifier of *file* discovered below directory *root*.

    The extension is stripped and the path is taken relative to the parent
    of *root*, so ``input1/sub/file.md`` under root ``input1`` becomes
    ``input1/sub/file``. Segments are always joined with ``/``.
    """
    rel = file.relative_to(root.parent)
    if rel.suffix:
        rel = rel.with_suffix("")
    return "/".join(_check_text(part, file) for part in rel.parts)


def check_extension(file: PurePath) -> None:
    """Raise NamingError if the extension of *file* is not valid UTF-8."""
    _check_text(file.suffix, file)


def single_file_name(file: PurePath) -> str:
    """Return the identifier of an explicitly included file (its stem)."""
    return _check_text(file.stem, file)


def is_hidden_name(path: PurePath) -> bool:
    """Return True if the leaf stem of *path* starts with a dot."""
    return path.stem.startswith(".")


def supports_symlinks() -> bool:
    """Return True where following symlinks during traversal is meaningful."""
    return os.name == "posix"
