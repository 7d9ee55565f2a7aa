#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the template and data tree used by the
docfmt test-suite.

Idempotent and 100 % Python. Files are written byte-exact (no trailing
newline is added) so rendered output can be compared verbatim.

Layout (relative to the target root):

    templates/main.j2                 includes input1/file, input2/file, file
    templates/file.j2                 single-file include → "file"
    templates/input1/file.md          → "input1/file"
    templates/input1/.hidden.md       hidden leaf, never collected
    templates/input1/subdir/file.md   → "input1/subdir/file"
    templates/input1/.drafts/draft.md hidden *directory*, leaf still collected
    templates/input1/notes.txt        extension not allowed
    templates/input2/file.j2          → "input2/file"
    templates/input2/.hidden.j2       hidden leaf
    data/data1.toml
    data/data2.json
"""
from __future__ import annotations

import sys
from pathlib import Path

EXTENSIONS = ["j2", "md"]

MAIN = "{% include 'input1/file' %}\n{% include 'input2/file' %}\n{% include 'file' %}"
EXPECTED_OUTPUT = "Hello Jane!\nGoodbye!\nFor now!"

EXPECTED_DATA = {
    "cities": ["colombo"],
    "person": {"firstName": "Jane"},
    "title": "This is another title",
}


# ────────────────────────── utilities ──────────────────────────
def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


# ───────────────────── template sources ─────────────────────
def _populate_templates(root: Path) -> None:
    tpl = root / "templates"
    _write(tpl / "main.j2", MAIN)
    _write(tpl / "file.j2", "For now!")

    _write(tpl / "input1" / "file.md", "Hello {{ person.firstName }}!")
    _write(tpl / "input1" / ".hidden.md", "{{ secret.value }}")
    _write(tpl / "input1" / "subdir" / "file.md", "Nested {{ title }}")
    _write(tpl / "input1" / ".drafts" / "draft.md", "Draft")
    _write(tpl / "input1" / "notes.txt", "not a template")

    _write(tpl / "input2" / "file.j2", "Goodbye!")
    _write(tpl / "input2" / ".hidden.j2", "hidden")


# ───────────────────── data files ─────────────────────
def _populate_data(root: Path) -> None:
    data = root / "data"
    _write(data / "data1.toml", "\n".join([
        'title = "This is a title"',
        'cities = ["london", "paris"]',
        "",
        "[person]",
        'firstName = "Jane"',
        'lastName = "Doe"',
        "",
    ]))
    _write(data / "data2.json", "\n".join([
        "{",
        '  "title": "This is another title",',
        '  "cities": ["colombo"],',
        '  "person": {"lastName": null}',
        "}",
        "",
    ]))


def populate(root: Path) -> Path:
    """Write the whole fixture tree below *root* and return it."""
    root = Path(root)
    _populate_templates(root)
    _populate_data(root)
    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).resolve().parents[2] / "test-fixtures"
    populate(target)
    print(f"fixtures written to {target}")
