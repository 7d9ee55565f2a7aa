from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from docfmt.core.interfaces import (
    DataReaderRegistryProtocol,
    OutputWriterProtocol,
    TemplateEngineProtocol,
    TreeCollectorProtocol,
)
from docfmt.io.output import FileOutputWriter
from docfmt.io.readers import DataReaderRegistry
from docfmt.io.walker import TreeCollector
from docfmt.logging.helpers import get_logger
from docfmt.rendering.data_merger import DataMerger
from docfmt.rendering.execution import AssemblyEngine
from docfmt.rendering.template_engine import JinjaTemplateEngine


@dataclass
class EngineBuilder:
    """Composable builder that wires default components into an AssemblyEngine.

    Every field left as None falls back to the default implementation, so
    tests and embedding callers only override the seams they care about.
    """
    logger: Optional[logging.Logger] = None
    template_engine: Optional[TemplateEngineProtocol] = None
    collector: Optional[TreeCollectorProtocol] = None
    data_readers: Optional[DataReaderRegistryProtocol] = None
    writer_factory: Optional[Callable[[bool], OutputWriterProtocol]] = None

    def build(self) -> AssemblyEngine:
        """Materialize an AssemblyEngine with the currently wired components."""
        lg = self.logger or get_logger('engine')

        tpl_engine = self.template_engine or JinjaTemplateEngine(logger=lg)
        collector = self.collector or TreeCollector(logger=lg)
        merger = DataMerger(readers=self.data_readers or DataReaderRegistry.default(), logger=lg)

        writer_factory = self.writer_factory or (lambda force: FileOutputWriter(force=force, logger=lg))

        return AssemblyEngine(
            template_engine=tpl_engine,
            collector=collector,
            data_merger=merger,
            writer_factory=writer_factory,
            logger=lg,
        )
