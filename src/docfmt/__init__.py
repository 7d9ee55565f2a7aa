from __future__ import annotations

import logging
from typing import Optional

from docfmt.constants import DEFAULT_EXTENSIONS, MAIN_TEMPLATE_ID
from docfmt.core.models import DocumentConfig, Outcome, TemplateSource
from docfmt.rendering.data_merger import DataMerger, deep_merge, merge_all
from docfmt.rendering.execution import AssemblyEngine
from docfmt.rendering.registry import TemplateRegistry, build_registry
from docfmt.rendering.renderer import Renderer
from docfmt.rendering.template_engine import JinjaTemplateEngine
from docfmt.runtime.container import EngineBuilder
from docfmt.io.walker import TreeCollector
from docfmt.io.output import FileOutputWriter
from docfmt.logging.helpers import get_logger
from docfmt.cli import DocFmt

__version__ = '0.1.0'


def engine_factory(*, logger: Optional[logging.Logger] = None) -> AssemblyEngine:
    """Factory helper that returns an AssemblyEngine wired with defaults."""
    return EngineBuilder(logger=logger or get_logger('engine')).build()


__all__ = [
    'DocFmt',
    'DEFAULT_EXTENSIONS',
    'MAIN_TEMPLATE_ID',
    'engine_factory',
    'AssemblyEngine',
    'DataMerger',
    'DocumentConfig',
    'EngineBuilder',
    'FileOutputWriter',
    'JinjaTemplateEngine',
    'Outcome',
    'Renderer',
    'TemplateRegistry',
    'TemplateSource',
    'TreeCollector',
    'build_registry',
    'deep_merge',
    'merge_all',
]
