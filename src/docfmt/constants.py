from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Reserved registry key of the document's entry template.
MAIN_TEMPLATE_ID: str = 'main'

# Template extensions collected from include directories when none are configured.
DEFAULT_EXTENSIONS: tuple[str, ...] = ('md', 'markdown')

JSON_SUFFIX: str = '.json'
TOML_SUFFIX: str = '.toml'
