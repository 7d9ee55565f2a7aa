from __future__ import annotations
"""Guarded writer for the assembled document."""
import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from docfmt.core.errors import OutputError
from docfmt.core.interfaces import OutputWriterProtocol
from docfmt.logging.helpers import get_logger


class FileOutputWriter(OutputWriterProtocol):
    """Write text to disk, refusing to replace an existing file unless forced.

    The content is encoded first and written to a temporary file next to
    the target, which is then moved into place. A failed write leaves any
    previous file untouched. Failures are logged and reported as ``False``.
    """

    def __init__(self, *, force: bool = False, logger: Optional[logging.Logger] = None) -> None:
        self._force = bool(force)
        self._log = logger or get_logger('output')
        self.last_error: OutputError | None = None

    def write(self, path: Path, content: str) -> bool:
        self.last_error = None
        self._log.info('Writing output file: %s', path)
        if path.exists() and not self._force:
            return self._fail(OutputError('output file already exists', path=path))
        try:
            data = content.encode('utf-8')
        except UnicodeEncodeError as exc:
            return self._fail(OutputError('output is not valid UTF-8', path=path, cause=exc))
        try:
            self._replace(path, data)
        except OSError as exc:
            return self._fail(OutputError('unable to write output file', path=path, cause=exc))
        return True

    @staticmethod
    def _replace(path: Path, data: bytes) -> None:
        fd, tmp = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
        try:
            with os.fdopen(fd, 'wb') as fh:
                fh.write(data)
            os.chmod(tmp, _target_mode(path))
            os.replace(tmp, path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
            raise

    def _fail(self, error: OutputError) -> bool:
        self.last_error = error
        self._log.error('%s', error)
        return False


def _target_mode(path: Path) -> int:
    # mkstemp creates 0600 files; keep the mode a plain open() would give.
    try:
        return path.stat().st_mode & 0o7777
    except FileNotFoundError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask
