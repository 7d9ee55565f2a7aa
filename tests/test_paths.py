from __future__ import annotations

import unittest
from pathlib import Path, PurePosixPath, PureWindowsPath

import support  # noqa: F401  (sys.path setup)

from docfmt.core.errors import NamingError
from docfmt.utils.paths import is_hidden_name, name_of, single_file_name
from docfmt.utils.suffixes import extension_of, is_extension_allowed, normalize_extensions


class NameOfTests(unittest.TestCase):
    def test_root_name_is_leading_segment(self) -> None:
        self.assertEqual(name_of(Path("input1"), Path("input1/file.md")), "input1/file")

    def test_nested_file(self) -> None:
        self.assertEqual(
            name_of(Path("docs/input1"), Path("docs/input1/sub/deep/file.md")),
            "input1/sub/deep/file",
        )

    def test_absolute_root(self) -> None:
        self.assertEqual(
            name_of(PurePosixPath("/srv/docs/input1"), PurePosixPath("/srv/docs/input1/a/b.markdown")),
            "input1/a/b",
        )

    def test_only_last_extension_is_stripped(self) -> None:
        self.assertEqual(name_of(Path("input1"), Path("input1/archive.tar.md")), "input1/archive.tar")

    def test_windows_separators_become_slashes(self) -> None:
        ident = name_of(
            PureWindowsPath(r"C:\docs\input1"),
            PureWindowsPath(r"C:\docs\input1\sub\file.md"),
        )
        self.assertEqual(ident, "input1/sub/file")

    def test_same_identifier_across_separator_conventions(self) -> None:
        posix = name_of(PurePosixPath("docs/input1"), PurePosixPath("docs/input1/sub/file.md"))
        win = name_of(PureWindowsPath(r"docs\input1"), PureWindowsPath(r"docs\input1\sub\file.md"))
        self.assertEqual(posix, win)
        self.assertEqual(posix, name_of(PurePosixPath("docs/input1"), PurePosixPath("docs/input1/sub/file.md")))

    def test_non_utf8_segment_fails(self) -> None:
        bad = PurePosixPath("input1/caf\udce9.md")
        with self.assertRaises(NamingError) as ctx:
            name_of(PurePosixPath("input1"), bad)
        self.assertEqual(ctx.exception.path, bad)

    def test_single_file_uses_stem_only(self) -> None:
        self.assertEqual(single_file_name(Path("some/dir/footer.md")), "footer")
        self.assertEqual(single_file_name(Path("some/dir/.hidden.md")), ".hidden")

    def test_single_file_non_utf8_fails(self) -> None:
        with self.assertRaises(NamingError):
            single_file_name(PurePosixPath("dir/\udcff.md"))


class HiddenNameTests(unittest.TestCase):
    def test_leaf_stem_decides(self) -> None:
        self.assertTrue(is_hidden_name(Path("input1/.hidden.md")))
        self.assertTrue(is_hidden_name(Path(".env")))
        self.assertFalse(is_hidden_name(Path("input1/.drafts/draft.md")))
        self.assertFalse(is_hidden_name(Path("input1/file.md")))


class ExtensionTests(unittest.TestCase):
    def test_normalize(self) -> None:
        self.assertEqual(normalize_extensions(["md"]), ["md"])
        self.assertEqual(normalize_extensions([".md", "md"]), ["md"])
        self.assertEqual(normalize_extensions(["md,markdown", " j2 "]), ["md", "markdown", "j2"])
        self.assertEqual(normalize_extensions(None), [])

    def test_extension_of(self) -> None:
        self.assertEqual(extension_of(Path("a/file.md")), "md")
        self.assertIsNone(extension_of(Path("a/Makefile")))

    def test_match_is_case_sensitive(self) -> None:
        allowed = frozenset({"md"})
        self.assertTrue(is_extension_allowed(Path("x.md"), allowed))
        self.assertFalse(is_extension_allowed(Path("x.MD"), allowed))
        self.assertFalse(is_extension_allowed(Path("README"), allowed))


if __name__ == "__main__":
    unittest.main()
