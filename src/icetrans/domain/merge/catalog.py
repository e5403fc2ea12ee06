"""Catalog operations expressed over one unit of work."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from icetrans.domain.errors import StorageError
from icetrans.domain.merge.results import MergeAction
from icetrans.domain.model import (
    Archive,
    File,
    SourceString,
    Translation,
    TranslationString,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from icetrans.domain.model import ArchiveName
    from icetrans.domain.ports.unit_of_work import CatalogUnitOfWork

log = getLogger(__name__)


class Catalog:
    """Lookups, lazy creation and upserts the merge strategies build on.

    Creation relies on the storage uniqueness constraints: an insert that
    conflicts with a concurrent one is rolled back to its savepoint and the
    existing row is returned instead.
    """

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self._uow = uow
        self._repositories = uow.repositories
        self._translations: dict[str, Translation] = {}

    # Lookups -----------------------------------------------------------------

    def find_archive(self, name: ArchiveName) -> Archive | None:
        return self._repositories.archives.get(name)

    def find_file(self, archive: Archive, name: str) -> File | None:
        return self._repositories.files.get(archive, name)

    def find_string(self, file: File, ordinal: int, identifier: str) -> SourceString | None:
        return self._repositories.source_strings.get(file, ordinal, identifier)

    # Lazy creation -----------------------------------------------------------

    def ensure_archive(self, name: ArchiveName) -> Archive:
        def create() -> Archive:
            archive = Archive(name=name)
            self._repositories.archives.add(archive)
            log.debug("Created archive %s", name)
            return archive

        return self._get_or_create(lambda: self.find_archive(name), create)

    def ensure_file(self, archive: Archive, name: str) -> File:
        def create() -> File:
            file = File(archive=archive, name=name)
            self._repositories.files.add(file)
            log.debug("Created file %s", file.path)
            return file

        return self._get_or_create(lambda: self.find_file(archive, name), create)

    def ensure_translation(self, name: str) -> Translation:
        cached = self._translations.get(name)
        if cached is not None:
            return cached

        def create() -> Translation:
            translation = Translation(name=name)
            self._repositories.translations.add(translation)
            log.info("Created translation set `%s`", name)
            return translation

        translation = self._get_or_create(
            lambda: self._repositories.translations.get(name),
            create,
        )
        self._translations[name] = translation
        return translation

    # Mutations ---------------------------------------------------------------

    def insert_string(
        self,
        file: File,
        *,
        version: int,
        ordinal: int,
        identifier: str,
        value: str,
    ) -> SourceString:
        source = SourceString(
            file=file,
            identifier=identifier,
            ordinal=ordinal,
            value=value,
            version=version,
        )
        self._repositories.source_strings.add(source)
        return source

    def update_string(self, source: SourceString, *, version: int, value: str) -> SourceString:
        source.revise(value, version=version)
        return source

    def upsert_translation_string(
        self,
        translation: Translation,
        source: SourceString,
        value: str,
    ) -> MergeAction:
        existing = self._repositories.translation_strings.get(translation, source)
        if existing is None:
            self._repositories.translation_strings.add(
                TranslationString(translation=translation, source=source, value=value)
            )
            return MergeAction.INSERTED_TRANSLATION
        if existing.value == value:
            return MergeAction.NOOP
        existing.value = value
        return MergeAction.UPDATED_TRANSLATION

    def _get_or_create[T](self, lookup: Callable[[], T | None], create: Callable[[], T]) -> T:
        found = lookup()
        if found is not None:
            return found
        try:
            with self._uow.savepoint():
                return create()
        except StorageError:
            found = lookup()
            if found is None:
                raise
            log.debug("Concurrent creation resolved to existing row %r", found)
            return found
