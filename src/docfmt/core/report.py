from __future__ import annotations

"""
Runtime execution report for one assembly run.

Counters are filled by the AssemblyEngine as each stage completes; stage
timings are measured with StageTimer around collect / data / render / write.
"""

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

STAGES = ("collect", "data", "render", "write")


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    template: Optional[str] = None
    output: Optional[str] = None
    succeeded: bool = False

    templates_registered: int = 0
    include_roots: List[str] = field(default_factory=list)
    data_files: int = 0
    bytes_written: int = 0

    time_by_stage: Dict[str, float] = field(default_factory=lambda: dict.fromkeys(STAGES, 0.0))

    errors: List[str] = field(default_factory=list)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def mark_paths(self, *, template: Path, output: Path, include: List[Path]) -> None:
        self.template = str(template)
        self.output = str(output)
        self.include_roots = [str(p) for p in include]

    def finish(self, *, succeeded: bool) -> None:
        self.succeeded = succeeded
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(asdict(self), indent=indent)


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
