from __future__ import annotations

"""
Template and data file readers.

This module exposes:
  * `read_template_text`: strict UTF-8 read of a template source.
  * `JsonDataReader`, `TomlDataReader`: data file parsers producing DataValue.
  * `DataReaderRegistry`: maps exact file suffixes to data readers.
  * `check_encodable`: reject strings that cannot be written as UTF-8.
  * `read_data_file`: open + decode + parse one data file.
"""

import datetime as _dt
import json
import logging
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from docfmt.constants import JSON_SUFFIX, TOML_SUFFIX
from docfmt.core.errors import DataError, SourceUnreadable, UnsupportedDataFormat
from docfmt.core.interfaces import DataReaderRegistryProtocol
from docfmt.core.models import DataValue
from docfmt.logging.helpers import get_logger


def read_template_text(path: Path) -> str:
    """Return the text of a template file or raise SourceUnreadable."""
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        raise SourceUnreadable('template is not valid UTF-8', path=path, cause=exc) from exc
    except OSError as exc:
        raise SourceUnreadable('unable to read template', path=path, cause=exc) from exc


class DataReader(ABC):
    @abstractmethod
    def parse(self, text: str, *, path: Path) -> DataValue:
        raise NotImplementedError


class JsonDataReader(DataReader):
    def parse(self, text: str, *, path: Path) -> DataValue:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataError('invalid JSON', path=path, cause=exc) from exc


class TomlDataReader(DataReader):
    """TOML reader; dates and times become ISO-8601 strings."""

    def parse(self, text: str, *, path: Path) -> DataValue:
        try:
            doc = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise DataError('invalid TOML', path=path, cause=exc) from exc
        return to_data_value(doc)


def to_data_value(value: Any) -> DataValue:
    if isinstance(value, dict):
        return {k: to_data_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_data_value(v) for v in value]
    if isinstance(value, (_dt.datetime, _dt.date, _dt.time)):
        return value.isoformat()
    return value


def check_encodable(value: DataValue, *, path: Path) -> DataValue:
    """Raise DataError if any key or string in *value* is not valid UTF-8.

    `json.loads` accepts lone surrogate escapes such as ``"\\ud800"``.
    """
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DataError("string is not valid UTF-8", path=path, cause=exc) from exc
    elif isinstance(value, dict):
        for key, item in value.items():
            check_encodable(key, path=path)
            check_encodable(item, path=path)
    elif isinstance(value, list):
        for item in value:
            check_encodable(item, path=path)
    return value


class DataReaderRegistry(DataReaderRegistryProtocol):
    """Suffix → reader mapping. Lookup is exact and case-sensitive."""

    def __init__(self) -> None:
        self._map: Dict[str, DataReader] = {}

    @classmethod
    def default(cls) -> 'DataReaderRegistry':
        reg = cls()
        reg.register(JSON_SUFFIX, JsonDataReader())
        reg.register(TOML_SUFFIX, TomlDataReader())
        return reg

    def register(self, suffix: str, reader: DataReader) -> None:
        key = suffix if suffix.startswith('.') else f'.{suffix}'
        self._map[key] = reader

    def suffixes(self) -> list[str]:
        return sorted(self._map)

    def for_path(self, path: Path) -> DataReader:
        reader = self._map.get(path.suffix)
        if reader is None:
            raise UnsupportedDataFormat(path)
        return reader


def read_data_file(
    path: Path,
    registry: DataReaderRegistryProtocol,
    *,
    logger: Optional[logging.Logger] = None,
) -> DataValue:
    """Open, decode and parse one data file, raising DataError on failure."""
    log = logger or get_logger('readers')
    log.info('Reading data file: %s', path)
    reader = registry.for_path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        raise DataError('data file is not valid UTF-8', path=path, cause=exc) from exc
    except OSError as exc:
        raise DataError('unable to open data file', path=path, cause=exc) from exc
    return check_encodable(reader.parse(text, path=path), path=path)
