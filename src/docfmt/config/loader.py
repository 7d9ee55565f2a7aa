from __future__ import annotations

"""Configuration loading and CLI precedence.

A TOML configuration file may hold every setting the command line accepts:

    template   = "doc/main.md"
    output     = "README.md"
    force      = false
    follow     = false
    strict     = true
    verbose    = false
    include    = ["doc/sections", "doc/footer.md"]
    extensions = ["md"]
    datafiles  = ["data/project.toml"]

    [data]
    title = "Inline values"

Precedence rules:
    - TEMPLATE / OUTPUT given on the command line replace the file's values.
    - Boolean flags are OR-ed: the CLI can switch a feature on, never off.
    - include / extensions / datafiles are concatenated, file entries first.
    - Without -e, the default extensions are the command line's value and
      are appended to the file's list like any other.
"""

import argparse
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from docfmt.constants import DEFAULT_EXTENSIONS
from docfmt.core.errors import ConfigError
from docfmt.core.models import DocumentConfig
from docfmt.io.readers import to_data_value
from docfmt.logging.helpers import get_logger
from docfmt.utils.suffixes import normalize_extensions

_BOOL_KEYS = ("force", "follow", "strict", "verbose")
_LIST_KEYS = ("include", "extensions", "datafiles")
_STR_KEYS = ("template", "output")


@dataclass
class ConfigFile:
    """Raw settings read from a TOML configuration file."""
    template: Optional[str] = None
    output: Optional[str] = None
    force: bool = False
    follow: bool = False
    strict: bool = False
    verbose: bool = False
    include: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=list)
    datafiles: List[str] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], *, path: Optional[Path] = None, logger: Optional[logging.Logger] = None) -> 'ConfigFile':
        log = logger or get_logger('config')
        cfg = cls()
        for key, value in raw.items():
            if key in _STR_KEYS:
                if not isinstance(value, str):
                    raise ConfigError(f"'{key}' must be a string", path=path)
                setattr(cfg, key, value)
            elif key in _BOOL_KEYS:
                if not isinstance(value, bool):
                    raise ConfigError(f"'{key}' must be a boolean", path=path)
                setattr(cfg, key, value)
            elif key in _LIST_KEYS:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"'{key}' must be an array of strings", path=path)
                setattr(cfg, key, list(value))
            elif key == "data":
                if not isinstance(value, dict):
                    raise ConfigError("'data' must be a table", path=path)
                cfg.data = to_data_value(value)
            else:
                log.debug("ignoring unknown config key %r in %s", key, path)
        return cfg


def load_config_file(path: Path, *, logger: Optional[logging.Logger] = None) -> ConfigFile:
    """Read and validate a TOML configuration file."""
    log = logger or get_logger('config')
    log.info('Reading config file: %s', path)
    try:
        with path.open('rb') as fh:
            raw = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError('unable to read config file', path=path, cause=exc) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError('invalid configuration', path=path, cause=exc) from exc
    return ConfigFile.from_mapping(raw, path=path, logger=log)


def resolve_config(ns: argparse.Namespace, *, logger: Optional[logging.Logger] = None) -> DocumentConfig:
    """Merge the optional config file with parsed CLI arguments."""
    cfg_path = getattr(ns, 'config', None)
    cfg = load_config_file(Path(cfg_path), logger=logger) if cfg_path else ConfigFile()

    template = getattr(ns, 'template', None) or cfg.template
    output = getattr(ns, 'output', None) or cfg.output
    if not template:
        raise ConfigError('missing template file')
    if not output:
        raise ConfigError('missing output file')

    # Without -e the defaults stand in for the command-line extensions.
    cli_extensions = list(getattr(ns, 'extensions', None) or DEFAULT_EXTENSIONS)
    extensions = normalize_extensions(cfg.extensions + cli_extensions)
    verbosity = int(getattr(ns, 'verbose', 0) or 0)
    if cfg.verbose:
        verbosity = max(verbosity, 1)

    return DocumentConfig(
        template=Path(template),
        output=Path(output),
        force=bool(getattr(ns, 'force', False)) or cfg.force,
        follow=bool(getattr(ns, 'follow', False)) or cfg.follow,
        strict=bool(getattr(ns, 'strict', False)) or cfg.strict,
        verbosity=verbosity,
        include=tuple(Path(p) for p in cfg.include + list(getattr(ns, 'include', None) or [])),
        extensions=tuple(extensions),
        datafiles=tuple(Path(p) for p in cfg.datafiles + list(getattr(ns, 'datafiles', None) or [])),
        data=cfg.data,
    )
