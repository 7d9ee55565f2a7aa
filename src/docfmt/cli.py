from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, Optional, Sequence

from docfmt.core.errors import ConfigError
from docfmt.core.interfaces import LoggerFactoryProtocol
from docfmt.logging.factory import DefaultLoggerFactory
from docfmt.logging.helpers import get_logger
from docfmt.config.loader import resolve_config
from docfmt.parsing.parser import _build_parser
from docfmt.runtime.container import EngineBuilder


logger = get_logger('docfmt')


def _configure_logging(verbosity: int, enable_json: bool) -> logging.Logger:
    """(Re)configure the base logger for the given verbosity and format."""
    global logger
    factory: LoggerFactoryProtocol = DefaultLoggerFactory.for_verbosity(verbosity, json_logs=enable_json)
    logger = factory.get_logger('docfmt')
    return logger


class DocFmt:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, builder: Optional[EngineBuilder] = None) -> int:
        """Run one assembly for an argv-like sequence and return the exit code."""
        ns: argparse.Namespace = _build_parser().parse_args(list(argv))
        json_logs = bool(ns.json_logs) or os.getenv('DOCFMT_JSON_LOGS') == '1'
        _configure_logging(ns.verbose, json_logs)

        try:
            config = resolve_config(ns, logger=logger)
        except ConfigError as exc:
            logger.error('%s', exc)
            return 1

        if config.verbosity != ns.verbose:
            _configure_logging(config.verbosity, json_logs)

        engine = (builder or EngineBuilder(logger=logger)).build()
        ok, report = engine.run_with_report(config)
        if ns.report:
            sys.stderr.write(report.to_json() + '\n')
        if ok:
            logger.info('Wrote %s (%d bytes)', config.output, report.bytes_written)
        return 0 if ok else 1


def main() -> NoReturn:
    """Entry point for the `docfmt` console script."""
    try:
        raise SystemExit(DocFmt.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)


if __name__ == '__main__':
    main()
