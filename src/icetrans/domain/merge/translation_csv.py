"""CSV import: merge externally authored translations into the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from logging import getLogger
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from icetrans.domain.errors import (
    FatalImportError,
    MissingCatalogEntryError,
    RecoverableImportError,
    StorageError,
    UnknownArchiveError,
)
from icetrans.domain.merge.catalog import Catalog
from icetrans.domain.merge.collisions import IdentifierCollisionTracker
from icetrans.domain.merge.modes import TranslationImport
from icetrans.domain.merge.transaction import TransactionScope

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from icetrans.domain.merge.results import MergeAction, PartialResult
    from icetrans.domain.model import ArchiveName
    from icetrans.domain.ports.unit_of_work import CatalogUnitOfWork

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StringRecord:
    """One CSV row: ``path,type,zeroUnk,identifier,value``."""

    path: str
    type: str
    zero_unk: str
    identifier: str
    value: str
    line: int | None = None

    @property
    def normalized_path(self) -> str:
        return self.path.replace("\\", "/")

    def split_path(self) -> tuple[str, str]:
        """Return ``(archive label, file name)``; a bare file name has label ``.``."""

        path = PurePosixPath(self.normalized_path)
        return str(path.parent), path.name

    @property
    def collision_key(self) -> str:
        return f"{self.normalized_path}\x00{self.identifier}"


@dataclass(slots=True)
class TranslationMergeImporter:
    """Merge CSV records as overrides of one translation set.

    The whole pass is a single transaction bracket. Records whose archive,
    file or source string is missing are reported and skipped; a path whose
    archive label is absent from ``archive_map`` aborts the pass and discards
    everything it did.
    """

    archive_map: Mapping[str, ArchiveName]
    translation_set: str

    def run(self, uow: CatalogUnitOfWork, records: Iterable[StringRecord]) -> PartialResult:
        catalog = Catalog(uow)
        tracker = IdentifierCollisionTracker()
        mode = TranslationImport(set_name=self.translation_set)

        with TransactionScope(uow, label=f"translation `{self.translation_set}`") as scope:
            try:
                with uow.savepoint():
                    catalog.ensure_translation(self.translation_set)
            except StorageError as exc:
                raise FatalImportError(
                    f"{self.translation_set}: cannot resolve translation set"
                ) from exc

            for record in records:
                archive_label, filename = record.split_path()
                archive_name = self.archive_map.get(archive_label)
                if archive_name is None:
                    raise UnknownArchiveError(archive_label)

                ordinal = tracker.next(record.collision_key)
                try:
                    scope.apply(
                        partial(
                            self._merge_record,
                            catalog,
                            mode,
                            record=record,
                            archive_label=archive_label,
                            archive_name=archive_name,
                            filename=filename,
                            ordinal=ordinal,
                        )
                    )
                except RecoverableImportError as exc:
                    log.warning("%s", exc.with_context(f"{filename}: {record.identifier}"))
                    scope.skip(exc)

        stats = scope.result.stats
        log.info(
            "Translation `%s` merged: inserted=%d updated=%d unchanged=%d skipped=%d",
            self.translation_set,
            stats.inserted,
            stats.updated,
            stats.unchanged,
            stats.skipped,
        )
        return scope.result

    def _merge_record(
        self,
        catalog: Catalog,
        mode: TranslationImport,
        *,
        record: StringRecord,
        archive_label: str,
        archive_name: ArchiveName,
        filename: str,
        ordinal: int,
    ) -> MergeAction:
        archive = catalog.find_archive(archive_name)
        if archive is None:
            raise MissingCatalogEntryError("archive not found in database", context=archive_label)

        file = catalog.find_file(archive, filename)
        if file is None:
            raise MissingCatalogEntryError(
                "file not found in database",
                context=f"{archive_label}: {filename}",
            )

        return mode.merge(
            catalog,
            file=file,
            ordinal=ordinal,
            identifier=record.identifier,
            value=record.value,
        )
