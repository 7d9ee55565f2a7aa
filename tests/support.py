"""Shared helpers for the docfmt test-suite."""
from __future__ import annotations

import contextlib
import os
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Iterator

# Dynamically ensure the src/ tree and the fixture builder are importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
for _p in (PROJECT_ROOT / "src", Path(__file__).resolve().parent / "tools"):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

import build_fixtures  # noqa: E402


@contextlib.contextmanager
def inside(path: Path) -> Iterator[None]:
    """Temporarily switch CWD to *path*."""
    cwd = Path.cwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(cwd)


class FixtureTestCase(unittest.TestCase):
    """Each test gets a fresh fixture tree in a temporary directory."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = build_fixtures.populate(Path(self._tmp.name))
        self.templates = self.root / "templates"
        self.data = self.root / "data"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, rel: str, body: str) -> Path:
        path = self.root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        return path
