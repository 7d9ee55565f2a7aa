from __future__ import annotations
"""Extension utilities for include-directory filters.

This module centralizes how tokens passed via `-e/--ext` (or the
`extensions` config key) are normalized and applied.

Semantics:
    * Tokens are bare extensions. A leading dot is accepted and dropped,
      so "md" and ".md" both mean "md".
    * Comma-separated tokens are split: "md,txt" -> ["md", "txt"].
    * Matching is exact and case-sensitive against the LAST extension of
      the filename ("notes.MD" does not match "md").
    * Files without an extension never match.

Examples:
    normalize_extensions(["md"])          -> ["md"]
    normalize_extensions([".md", "md"])   -> ["md"]
    normalize_extensions(["md,markdown"]) -> ["md", "markdown"]
"""

from pathlib import PurePath
from typing import Optional, Sequence


def normalize_extensions(extensions: Sequence[str] | None) -> list[str]:
    """Normalize extension tokens from CLI or config, keeping first-seen order.

    Args:
        extensions: Raw tokens, possibly dotted or comma-separated.

    Returns:
        A deduplicated list of bare extensions.
    """
    if not extensions:
        return []
    out: list[str] = []
    for raw in extensions:
        for token in (raw or "").split(","):
            ext = token.strip().lstrip(".")
            if ext and ext not in out:
                out.append(ext)
    return out


def extension_of(path: PurePath) -> Optional[str]:
    """Return the last extension of *path* without its dot, or None."""
    suffix = path.suffix
    return suffix[1:] if suffix else None


def is_extension_allowed(path: PurePath, allowed: set[str] | frozenset[str]) -> bool:
    """Return True if *path* has an extension listed in *allowed*."""
    ext = extension_of(path)
    return ext is not None and ext in allowed
