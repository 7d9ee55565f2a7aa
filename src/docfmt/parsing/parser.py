# docfmt/parsing/parser.py
from __future__ import annotations

import argparse

from docfmt.constants import DEFAULT_EXTENSIONS


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the docfmt CLI argument parser.

    Notes:
        - TEMPLATE and OUTPUT are optional here; their presence is checked
          after merging with the configuration file.
        - List-valued flags start empty (``None``) so the resolver can tell
          "not given" apart from "given" and concatenate with the config.
    """
    p = argparse.ArgumentParser(
        prog="docfmt",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [TEMPLATE] [OUTPUT] [OPTIONS]",
        add_help=False,
        description=(
            "docfmt – assemble one document from a main template, fragment\n"
            "templates collected from files and directories, and merged data files."
        ),
    )

    g_doc = p.add_argument_group("Document")
    g_inc = p.add_argument_group("Templates")
    g_dat = p.add_argument_group("Data")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Document
    # -----------------------
    g_doc.add_argument(
        "template",
        nargs="?",
        metavar="TEMPLATE",
        help=(
            "Path to the main file defining the document structure. "
            "May be omitted if a config file is given."
        ),
    )
    g_doc.add_argument(
        "output",
        nargs="?",
        metavar="OUTPUT",
        help="Path to the output file. May be omitted if a config file is given.",
    )
    g_doc.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        dest="config",
        help="Path to a TOML file containing the configuration.",
    )
    g_doc.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force overwriting of the output file.",
    )

    # -----------------------
    # Templates
    # -----------------------
    g_inc.add_argument(
        "-i",
        "--include",
        metavar="PATH",
        action="append",
        dest="include",
        help=(
            "Path or file to include in the document. Repeatable. "
            "Directories are traversed recursively; each file is registered "
            "under its path relative to the directory's parent, without extension."
        ),
    )
    g_inc.add_argument(
        "-e",
        "--ext",
        metavar="EXT[,EXT]",
        action="append",
        dest="extensions",
        help=(
            "Comma-separated list of file extensions to include from directories. "
            f"Repeatable. Defaults to {','.join(DEFAULT_EXTENSIONS)}; the config file's "
            "extensions are added in front of these values."
        ),
    )
    g_inc.add_argument(
        "--follow",
        action="store_true",
        help="Follow symlinks when traversing directories (POSIX only).",
    )
    g_inc.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Restrict accessing non-existing fields or indices in templates.",
    )

    # -----------------------
    # Data
    # -----------------------
    g_dat.add_argument(
        "-d",
        "--data",
        metavar="FILE",
        action="append",
        dest="datafiles",
        help=(
            "File containing data to be used in the document. May be a JSON or "
            "TOML file; the type is determined by the file extension. Repeatable; "
            "later files are merged over earlier ones."
        ),
    )

    # -----------------------
    # Misc
    # -----------------------
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        dest="verbose",
        help="Print verbose output (-v info, -vv debug).",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs in JSON format instead of plain text.",
    )
    g_misc.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON execution report on stderr when done.",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_version()}",
    )
    g_misc.add_argument(
        "-h",
        "--help",
        action="help",
        help="Show this help message and exit.",
    )

    return p


def _version() -> str:
    from docfmt import __version__

    return __version__
