from __future__ import annotations

"""
Protocol describing the execution surface of an assembly engine.
"""

from typing import Protocol

from docfmt.core.models import DocumentConfig
from docfmt.core.report import ExecutionReport


class AssemblyEngineProtocol(Protocol):
    def run(self, config: DocumentConfig) -> bool:
        ...

    def run_with_report(self, config: DocumentConfig) -> tuple[bool, ExecutionReport]:
        ...
