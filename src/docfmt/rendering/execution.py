from __future__ import annotations

"""
AssemblyEngine – one document per run.

Stages:
    1. collect  – build the template registry (main + include roots)
    2. data     – load and merge data files on top of the inline data block
    3. render   – resolve "main" against registry and context
    4. write    – hand the text to the output writer

Stages 1 and 2 both run even if the other failed, so a single run reports
every problem. Rendering and writing only happen when both succeeded.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from docfmt.core.errors import DocfmtError
from docfmt.core.interfaces import (
    AssemblyEngineProtocol,
    OutputWriterProtocol,
    TemplateEngineProtocol,
    TreeCollectorProtocol,
)
from docfmt.core.models import DocumentConfig
from docfmt.core.report import ExecutionReport, StageTimer
from docfmt.rendering.data_merger import DataMerger
from docfmt.rendering.registry import build_registry
from docfmt.rendering.renderer import Renderer
from docfmt.logging.helpers import get_logger
from docfmt.utils.paths import supports_symlinks


class AssemblyEngine(AssemblyEngineProtocol):
    def __init__(
        self,
        *,
        template_engine: TemplateEngineProtocol,
        collector: TreeCollectorProtocol,
        data_merger: DataMerger,
        writer_factory: Callable[[bool], OutputWriterProtocol],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tpl_engine = template_engine
        self._collector = collector
        self._merger = data_merger
        self._writer_factory = writer_factory
        self._log = logger or get_logger('engine')

    def run(self, config: DocumentConfig) -> bool:
        ok, _ = self.run_with_report(config)
        return ok

    def run_with_report(self, config: DocumentConfig) -> Tuple[bool, ExecutionReport]:
        report = ExecutionReport()
        report.mark_paths(template=config.template, output=config.output, include=list(config.include))
        ok = self._execute(config, report)
        report.finish(succeeded=ok)
        return ok, report

    def _follow(self, config: DocumentConfig) -> bool:
        if not config.follow:
            return False
        if not supports_symlinks():
            self._log.warning('Follow mode is not supported on this platform; ignored')
            return False
        self._log.info('Enabled follow mode')
        return True

    def _execute(self, config: DocumentConfig, report: ExecutionReport) -> bool:
        with StageTimer(report, 'collect'):
            reg_outcome = build_registry(
                config.template,
                config.include,
                config.extensions,
                follow_symlinks=self._follow(config),
                check_syntax=self._tpl_engine.check_syntax,
                collector=self._collector,
                logger=self._log,
            )
        for err in reg_outcome.errors:
            report.add_error(str(err))

        with StageTimer(report, 'data'):
            data_outcome = self._merger.load_all(config.data, config.datafiles)
        for err in data_outcome.errors:
            report.add_error(str(err))

        if reg_outcome.value is None or data_outcome.value is None:
            self._log.error(
                'Aborting: %d template error(s), %d data error(s)',
                len(reg_outcome.errors),
                len(data_outcome.errors),
            )
            return False
        registry = reg_outcome.value
        report.templates_registered = len(registry)
        report.data_files = len(config.datafiles)

        renderer = Renderer(template_engine=self._tpl_engine, strict=config.strict, logger=self._log)
        with StageTimer(report, 'render'):
            try:
                content = renderer.render(registry, data_outcome.value)
            except DocfmtError as exc:
                self._log.error('Unable to render template: %s', config.template)
                self._log.error('%s', exc)
                report.add_error(str(exc))
                return False

        writer = self._writer_factory(config.force)
        with StageTimer(report, 'write'):
            if not writer.write(Path(config.output), content):
                report.add_error(f'unable to write output file [{config.output}]')
                return False
        report.bytes_written = len(content.encode('utf-8'))
        return True
