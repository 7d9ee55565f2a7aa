from __future__ import annotations

"""
Data context assembly.

Data files are merged left to right on top of the inline data block; later
files win. Mappings merge key by key and a ``null`` value deletes the key.
Anything else (scalars, sequences, a mapping meeting a non-mapping) is
replaced wholesale.
"""

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from docfmt.core.errors import DataError, DocfmtError
from docfmt.core.interfaces import DataReaderRegistryProtocol
from docfmt.core.models import DataValue, Outcome
from docfmt.io.readers import DataReaderRegistry, read_data_file
from docfmt.logging.helpers import get_logger


def deep_merge(accumulated: DataValue, incoming: DataValue) -> DataValue:
    """Return *incoming* merged into *accumulated*; inputs are not mutated."""
    if isinstance(accumulated, dict) and isinstance(incoming, dict):
        merged: Dict[str, Any] = dict(accumulated)
        for key, value in incoming.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = deep_merge(merged.get(key, {}), value)
        return merged
    return deepcopy(incoming)


def merge_all(base: DataValue, files: Iterable[Tuple[Path, DataValue]]) -> DataValue:
    """Fold every (path, value) pair into *base* in the given order."""
    result = deepcopy(base)
    for _path, value in files:
        result = deep_merge(result, value)
    return result


class DataMerger:
    """Load data files and merge them into one context mapping."""

    def __init__(
        self,
        *,
        readers: Optional[DataReaderRegistryProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._readers = readers or DataReaderRegistry.default()
        self._log = logger or get_logger('data')

    def load(self, path: Path) -> Dict[str, Any]:
        value = read_data_file(path, self._readers, logger=self._log)
        if not isinstance(value, dict):
            raise DataError('top-level value must be a table or an object', path=path)
        return value

    def load_all(self, base: Optional[Dict[str, Any]], paths: Sequence[Path]) -> Outcome[Dict[str, Any]]:
        """Parse every file, collecting failures; merge only if all succeed."""
        outcome: Outcome[Dict[str, Any]] = Outcome()
        parsed: list[Tuple[Path, DataValue]] = []
        for path in paths:
            path = Path(path)
            try:
                parsed.append((path, self.load(path)))
            except DocfmtError as exc:
                self._log.error('Unable to read data file: %s', path)
                self._log.error('%s', exc)
                outcome.add(exc)
        if outcome.ok:
            outcome.value = merge_all(base or {}, parsed)
        return outcome
