"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from icetrans.adapters.aida import read_archive_list, read_string_records
from icetrans.adapters.extraction import build_decoders
from icetrans.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from icetrans.domain.merge import (
    DirectImportMerger,
    ExternalMappingLoader,
    TranslationMergeImporter,
)
from icetrans.domain.ports.unit_of_work import CatalogUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from icetrans.domain.merge import ArchiveScanSummary, ImportMode, PartialResult
    from icetrans.domain.ports.extraction import ArchiveOpener, TextDecoder

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


def _ensure_storage(database_uri: str | None) -> None:
    if database_uri is not None or not is_started():
        log.info("Opening database `%s`...", database_uri or "default")
        startup(database_uri=database_uri, force=True)


def import_archives(
    paths: Iterable[Path],
    *,
    mode: ImportMode,
    open_archive: ArchiveOpener | None = None,
    decode_text: TextDecoder | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
) -> ArchiveScanSummary:
    """Merge the text files of the given archives into the catalog."""

    if unit_of_work_factory is None:
        _ensure_storage(database_uri)
    effective_uow = unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    if open_archive is None or decode_text is None:
        default_opener, default_decoder = build_decoders()
        open_archive = open_archive or default_opener
        decode_text = decode_text or default_decoder

    log.info("Starting archive import: mode=%s", mode.describe())
    summary = DirectImportMerger(mode=mode).scan(
        list(paths),
        open_archive=open_archive,
        decode_text=decode_text,
        unit_of_work_factory=effective_uow,
    )

    stats = summary.stats
    log.info(
        "Import complete! archives=%d files=%d inserted=%d updated=%d unchanged=%d "
        "skipped=%d errors=%d",
        len(summary.archives),
        len(summary.files),
        stats.inserted,
        stats.updated,
        stats.unchanged,
        stats.skipped,
        len(summary.all_errors),
    )
    return summary


def import_translation_csv(
    *,
    archive_list: Path,
    strings: Path,
    translation: str,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
) -> PartialResult:
    """Merge an externally authored strings CSV as overrides of ``translation``."""

    archive_map = ExternalMappingLoader().load(read_archive_list(archive_list))
    records = read_string_records(strings)

    if unit_of_work_factory is None:
        _ensure_storage(database_uri)
    effective_uow = unit_of_work_factory or SqlAlchemyCatalogUnitOfWork

    log.info("Importing %d records into translation `%s`...", len(records), translation)
    importer = TranslationMergeImporter(archive_map=archive_map, translation_set=translation)
    with effective_uow() as uow:
        result = importer.run(uow, records)

    log.info("Import complete! committed=%d skipped=%d", result.committed_count, result.stats.skipped)
    return result
