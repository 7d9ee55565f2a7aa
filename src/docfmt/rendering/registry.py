from __future__ import annotations

"""
Template namespace for one assembly run.

The registry maps identifiers to TemplateSource objects. It always holds
the reserved "main" entry once built, rejects duplicate identifiers
instead of overwriting them, and optionally validates every source with
the template engine at registration time.

`build_registry` is the all-or-nothing constructor: it registers the main
template and every include root, collects every failure, and only returns
a registry when none occurred.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from docfmt.constants import MAIN_TEMPLATE_ID
from docfmt.core.errors import DocfmtError, DuplicateIdentifier
from docfmt.core.interfaces import TemplateLookupProtocol, TreeCollectorProtocol
from docfmt.core.models import Outcome, TemplateSource
from docfmt.io.readers import read_template_text
from docfmt.io.walker import TreeCollector
from docfmt.logging.helpers import get_logger

# (identifier, text, path) -> None, raising RegistrationError when invalid.
SyntaxCheck = Callable[..., None]


class TemplateRegistry(TemplateLookupProtocol):
    def __init__(
        self,
        *,
        check_syntax: Optional[SyntaxCheck] = None,
        collector: Optional[TreeCollectorProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sources: Dict[str, TemplateSource] = {}
        self._check = check_syntax
        self._log = logger or get_logger('registry')
        self._collector = collector or TreeCollector(logger=self._log)

    # -------- registration --------

    def register_main(self, path: Path) -> None:
        """Register the document's entry template under the reserved id."""
        self.register(MAIN_TEMPLATE_ID, path)

    def register(self, identifier: str, path: Path) -> None:
        """Add one template; raises a RegistrationError subclass on failure."""
        existing = self._sources.get(identifier)
        if existing is not None:
            raise DuplicateIdentifier(identifier, path=path, existing=existing.path)
        text = read_template_text(path)
        if self._check is not None:
            self._check(identifier, text, path=path)
        self._sources[identifier] = TemplateSource(identifier=identifier, path=path, text=text)
        self._log.info('Registered template: %r', identifier)

    def register_tree(self, root: Path, extensions: Iterable[str], follow_symlinks: bool = False) -> List[DocfmtError]:
        """Register every file found under *root*; return all failures."""
        errors: List[DocfmtError] = []
        for entry in self._collector.collect(root, extensions, follow_symlinks):
            if entry.error is not None:
                self._log.error('%s', entry.error)
                errors.append(entry.error)
                continue
            try:
                self.register(entry.identifier, entry.path)
            except DocfmtError as exc:
                self._log.error('Unable to register file: %s', entry.path)
                self._log.error('%s', exc)
                errors.append(exc)
        return errors

    # -------- lookup --------

    def get(self, identifier: str) -> Optional[TemplateSource]:
        return self._sources.get(identifier)

    def identifiers(self) -> List[str]:
        return sorted(self._sources)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())


def build_registry(
    main: Path,
    include: Sequence[Path],
    extensions: Iterable[str],
    *,
    follow_symlinks: bool = False,
    check_syntax: Optional[SyntaxCheck] = None,
    collector: Optional[TreeCollectorProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> Outcome[TemplateRegistry]:
    """Build the full namespace; the outcome carries a registry only on success."""
    log = logger or get_logger('registry')
    exts = list(extensions)
    registry = TemplateRegistry(check_syntax=check_syntax, collector=collector, logger=log)
    outcome: Outcome[TemplateRegistry] = Outcome()

    try:
        registry.register_main(main)
        log.info('Registered main template: %s', main)
    except DocfmtError as exc:
        log.error('Unable to register main template: %s', main)
        log.error('%s', exc)
        outcome.add(exc)

    for root in include:
        outcome.extend(registry.register_tree(Path(root), exts, follow_symlinks))

    if outcome.ok:
        outcome.value = registry
    return outcome
