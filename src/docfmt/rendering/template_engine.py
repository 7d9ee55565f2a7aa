"""
template_engine – Jinja2 binding for docfmt's TemplateEngineProtocol.

Every registered identifier is reachable from templates through
``{% include "input1/file" %}``; data fields are read with
``{{ person.firstName }}``. Strict mode swaps the undefined type:

  • strict     → StrictUndefined    (any absent field or index fails)
  • permissive → ChainableUndefined (absent fields, even chained, render "")

An unknown include is always a failure, whatever the mode. So is a template
that includes itself, directly or through a cycle.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import (
    ChainableUndefined,
    Environment,
    FunctionLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from docfmt.core.errors import InvalidTemplateSource, RenderError
from docfmt.core.interfaces import TemplateEngineProtocol, TemplateLookupProtocol
from docfmt.logging.helpers import get_logger


class JinjaTemplateEngine(TemplateEngineProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("templates")
        self._syntax_env = self._make_env(None, strict=False)

    @staticmethod
    def _make_env(templates: Optional[TemplateLookupProtocol], *, strict: bool) -> Environment:
        def _load(name: str):
            src = templates.get(name) if templates is not None else None
            if src is None:
                return None
            return src.text, str(src.path), lambda: True

        return Environment(
            loader=FunctionLoader(_load),
            undefined=StrictUndefined if strict else ChainableUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            auto_reload=False,
        )

    def check_syntax(self, identifier: str, text: str, *, path: Optional[Path] = None) -> None:
        """Raise InvalidTemplateSource if *text* does not parse."""
        try:
            self._syntax_env.parse(text, name=identifier, filename=str(path) if path else None)
        except TemplateSyntaxError as exc:
            raise InvalidTemplateSource(
                f"invalid template {identifier!r} (line {exc.lineno})", path=path, cause=exc
            ) from exc

    def render(
        self,
        templates: TemplateLookupProtocol,
        identifier: str,
        context: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> str:
        env = self._make_env(templates, strict=strict)
        try:
            return env.get_template(identifier).render(dict(context))
        except TemplateNotFound as exc:
            raise RenderError(f"unknown template {exc.name!r}", cause=exc) from exc
        except UndefinedError as exc:
            raise RenderError(f"undefined value while rendering {identifier!r}", cause=exc) from exc
        except RecursionError as exc:
            raise RenderError(f"recursive include while rendering {identifier!r}", cause=exc) from exc
        except TemplateError as exc:
            raise RenderError(f"unable to render {identifier!r}", cause=exc) from exc
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise RenderError(f"unable to render {identifier!r}", cause=exc) from exc
