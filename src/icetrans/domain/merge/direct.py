"""Archive scan: merge the text files of game archives into the catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from icetrans.domain.errors import (
    MissingCatalogEntryError,
    RecoverableImportError,
    StorageError,
)
from icetrans.domain.merge.archive_names import ArchiveNameResolver
from icetrans.domain.merge.catalog import Catalog
from icetrans.domain.merge.collisions import IdentifierCollisionTracker
from icetrans.domain.merge.results import ArchiveImportResult, ArchiveScanSummary
from icetrans.domain.merge.transaction import TransactionScope

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from pathlib import Path

    from icetrans.domain.merge.modes import ImportMode
    from icetrans.domain.merge.results import PartialResult
    from icetrans.domain.model import Archive, ArchiveName, File
    from icetrans.domain.ports.extraction import (
        ArchiveFile,
        ArchiveGroup,
        ArchiveOpener,
        TextDecoder,
        TextPair,
    )
    from icetrans.domain.ports.unit_of_work import CatalogUnitOfWork

log = getLogger(__name__)


@dataclass(slots=True)
class DirectImportMerger:
    """Merge decoded archive text files according to ``mode``.

    Each text file is merged in its own transaction bracket with its own
    identifier tracker. A translated identifier missing from the catalog only
    skips that pair. Any other recoverable error stops the rest of the file,
    keeps what the file already applied, and moves on to the next file.
    """

    mode: ImportMode
    resolver: ArchiveNameResolver = field(default_factory=ArchiveNameResolver)

    def scan(
        self,
        paths: Iterable[Path],
        *,
        open_archive: ArchiveOpener,
        decode_text: TextDecoder,
        unit_of_work_factory: Callable[[], CatalogUnitOfWork],
    ) -> ArchiveScanSummary:
        summary = ArchiveScanSummary()
        for path in paths:
            try:
                name = self.resolver.parse_path(path)
                log.info("Opening archive `%s`...", path)
                groups = open_archive(path)
            except RecoverableImportError as exc:
                log.warning("%s", exc.with_context(str(path)))
                summary.errors.append(exc)
                continue

            with unit_of_work_factory() as uow:
                summary.archives.append(self.merge_archive(uow, name, groups, decode_text))
        return summary

    def merge_archive(
        self,
        uow: CatalogUnitOfWork,
        name: ArchiveName,
        groups: Sequence[ArchiveGroup],
        decode_text: TextDecoder,
    ) -> ArchiveImportResult:
        catalog = Catalog(uow)
        result = ArchiveImportResult(name=name)
        archive: Archive | None = None

        for group in groups:
            for entry in group.files:
                if not entry.is_text:
                    continue
                log.info("Importing file `%s`...", entry.name)
                try:
                    pairs = decode_text(entry.data)
                    if archive is None:
                        archive = self._resolve_archive(uow, catalog, name)
                    file = self._resolve_file(uow, catalog, archive, entry)
                except RecoverableImportError as exc:
                    log.warning("%s", exc.with_context(f"{name}: {entry.name}"))
                    result.errors.append(exc)
                    continue
                try:
                    result.files.append(self.merge_file(uow, catalog, file, pairs))
                except StorageError as exc:
                    log.warning("%s", exc.with_context(file.path))
                    result.errors.append(exc)

        stats = result.stats
        log.info(
            "Archive %s merged (%s): files=%d inserted=%d updated=%d unchanged=%d skipped=%d",
            name,
            self.mode.describe(),
            len(result.files),
            stats.inserted,
            stats.updated,
            stats.unchanged,
            stats.skipped,
        )
        return result

    def merge_file(
        self,
        uow: CatalogUnitOfWork,
        catalog: Catalog,
        file: File,
        pairs: Sequence[TextPair],
    ) -> PartialResult:
        tracker = IdentifierCollisionTracker()
        with TransactionScope(uow, label=file.path) as scope:
            for pair in pairs:
                ordinal = tracker.next(pair.identifier)
                try:
                    scope.apply(
                        partial(
                            self.mode.merge,
                            catalog,
                            file=file,
                            ordinal=ordinal,
                            identifier=pair.identifier,
                            value=pair.value,
                        )
                    )
                except MissingCatalogEntryError as exc:
                    log.warning("%s", exc.with_context(f"{file.name}: {pair.identifier}"))
                    scope.skip(exc)
                except RecoverableImportError as exc:
                    log.warning("%s", exc.with_context(f"{file.name}: {pair.identifier}"))
                    scope.abandon(exc)
                    break
        return scope.result

    def _resolve_archive(
        self,
        uow: CatalogUnitOfWork,
        catalog: Catalog,
        name: ArchiveName,
    ) -> Archive:
        with uow.savepoint():
            archive = catalog.ensure_archive(name)
        uow.commit()
        return archive

    def _resolve_file(
        self,
        uow: CatalogUnitOfWork,
        catalog: Catalog,
        archive: Archive,
        entry: ArchiveFile,
    ) -> File:
        with uow.savepoint():
            file = catalog.ensure_file(archive, entry.name)
        uow.commit()
        return file
