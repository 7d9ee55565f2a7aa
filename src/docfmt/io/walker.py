from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from docfmt.core.errors import CollectError, DocfmtError
from docfmt.core.interfaces import TreeCollectorProtocol
from docfmt.core.models import CollectedEntry
from docfmt.logging.helpers import get_logger, trace_io
from docfmt.utils.paths import check_extension, is_hidden_name, name_of, single_file_name
from docfmt.utils.suffixes import is_extension_allowed, normalize_extensions


class TreeCollector(TreeCollectorProtocol):
    """Walk an include path and yield named template files.

    A plain file yields exactly one entry named after its stem, with no
    extension or hidden-name filtering. A directory is walked recursively;
    files are kept when their extension is allowed, they are regular files
    once resolved and their own stem does not start with a dot. Failures
    are yielded as entries carrying an error and traversal goes on.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('walker')

    def collect(self, root: Path, extensions: Iterable[str], follow_symlinks: bool = False) -> Iterator[CollectedEntry]:
        root = Path(root)
        if root.is_file():
            yield self._single_file(root)
        elif root.is_dir():
            allowed = frozenset(normalize_extensions(list(extensions)))
            self._log.info('Walking directory: %s', root)
            self._log.info('Including files with extensions: %s', sorted(allowed))
            yield from self._walk(root, allowed, follow_symlinks)
        else:
            yield CollectedEntry(path=root, error=CollectError('include path does not exist', path=root))

    def _single_file(self, path: Path) -> CollectedEntry:
        self._log.info('Reading file: %s', path)
        try:
            return CollectedEntry(identifier=single_file_name(path), path=path)
        except DocfmtError as exc:
            return CollectedEntry(path=path, error=exc)

    def _walk(self, root: Path, allowed: frozenset[str], follow: bool) -> Iterator[CollectedEntry]:
        pending: List[DocfmtError] = []
        # Inode chain from root to each directory still to be walked (follow mode only).
        ancestors: Dict[str, FrozenSet[Tuple[int, int]]] = {}

        def _on_error(exc: OSError) -> None:
            where = Path(exc.filename) if exc.filename else root
            pending.append(CollectError('unable to read directory', path=where, cause=exc))

        if follow:
            try:
                ancestors[str(root)] = frozenset({self._inode(root)})
            except OSError as exc:
                yield CollectedEntry(path=root, error=CollectError('unable to read metadata of directory', path=root, cause=exc))
                return

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow):
            if follow:
                chain = ancestors.pop(dirpath, frozenset())
                dirnames[:] = self._prune_loops(dirpath, dirnames, chain, ancestors, pending)

            while pending:
                err = pending.pop(0)
                yield CollectedEntry(path=err.path, error=err)

            for fn in filenames:
                entry = self._inspect(root, Path(dirpath, fn), allowed, follow)
                if entry is not None:
                    yield entry

        while pending:
            err = pending.pop(0)
            yield CollectedEntry(path=err.path, error=err)

    @staticmethod
    def _inode(path: str | Path) -> Tuple[int, int]:
        st = os.stat(path)
        return (st.st_dev, st.st_ino)

    def _prune_loops(
        self,
        dirpath: str,
        dirnames: List[str],
        chain: FrozenSet[Tuple[int, int]],
        ancestors: Dict[str, FrozenSet[Tuple[int, int]]],
        pending: List[DocfmtError],
    ) -> List[str]:
        keep: List[str] = []
        for name in dirnames:
            child = os.path.join(dirpath, name)
            try:
                key = self._inode(child)
            except OSError as exc:
                pending.append(CollectError('unable to read metadata of directory', path=Path(child), cause=exc))
                continue
            if key in chain:
                pending.append(CollectError('filesystem loop detected', path=Path(child)))
                continue
            ancestors[child] = chain | {key}
            keep.append(name)
        return keep

    def _inspect(self, root: Path, path: Path, allowed: frozenset[str], follow: bool) -> Optional[CollectedEntry]:
        trace_io(self._log, 'inspecting entry', path=str(path))
        try:
            check_extension(path)
        except DocfmtError as exc:
            return CollectedEntry(path=path, error=exc)
        if not is_extension_allowed(path, allowed):
            return None
        try:
            st = os.stat(path, follow_symlinks=follow)
        except OSError as exc:
            return CollectedEntry(
                path=path,
                error=CollectError('unable to read metadata of file', path=path, cause=exc),
            )
        if not stat.S_ISREG(st.st_mode):
            return None
        if is_hidden_name(path):
            trace_io(self._log, 'skipping hidden file', path=str(path))
            return None
        self._log.info('Reading file: %s', path)
        try:
            return CollectedEntry(identifier=name_of(root, path), path=path)
        except DocfmtError as exc:
            return CollectedEntry(path=path, error=exc)
