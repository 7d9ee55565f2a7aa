"""
docfmt.utils – Small shared utilities (identifier naming, extension filters).
"""
from .paths import check_extension, is_hidden_name, name_of, single_file_name, supports_symlinks
from .suffixes import extension_of, is_extension_allowed, normalize_extensions

__all__ = [
    "check_extension",
    "is_hidden_name",
    "name_of",
    "single_file_name",
    "supports_symlinks",
    "extension_of",
    "is_extension_allowed",
    "normalize_extensions",
]
