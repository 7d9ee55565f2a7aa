"""Public API surface for docfmt.rendering."""
__all__ = [
    "data_merger",
    "execution",
    "registry",
    "renderer",
    "template_engine",
]
