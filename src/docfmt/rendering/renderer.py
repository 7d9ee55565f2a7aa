"""
Renderer component for docfmt.

Resolves the reserved "main" template against a built registry and the
merged data context through a TemplateEngineProtocol implementation
(JinjaTemplateEngine by default in the runtime container).
"""

import logging
from typing import Any, Mapping, Optional

from docfmt.constants import MAIN_TEMPLATE_ID
from docfmt.core.interfaces import TemplateEngineProtocol, TemplateLookupProtocol
from docfmt.logging.helpers import get_logger


class Renderer:
    def __init__(
        self,
        *,
        template_engine: TemplateEngineProtocol,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tpl_engine = template_engine
        self._strict = bool(strict)
        self._log = logger or get_logger("render")
        if self._strict:
            self._log.info("Enabled strict mode")

    @property
    def strict(self) -> bool:
        return self._strict

    def render(
        self,
        templates: TemplateLookupProtocol,
        context: Mapping[str, Any],
        identifier: str = MAIN_TEMPLATE_ID,
    ) -> str:
        """Render *identifier* (main by default); raises RenderError."""
        self._log.info("Rendering template: %r", identifier)
        return self._tpl_engine.render(templates, identifier, context, strict=self._strict)
