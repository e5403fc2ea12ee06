"""Ports for persisting catalog entities."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from icetrans.domain.model import (
    Archive,
    ArchiveName,
    File,
    SourceString,
    Translation,
    TranslationString,
)


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent entity store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ArchiveRepository(Repository[Archive], Protocol):
    """Persistence contract for archives, keyed by archive name."""

    def get(self, name: ArchiveName) -> Archive | None: ...


@runtime_checkable
class FileRepository(Repository[File], Protocol):
    """Persistence contract for files, keyed by (archive, file name)."""

    def get(self, archive: Archive, name: str) -> File | None: ...


@runtime_checkable
class SourceStringRepository(Repository[SourceString], Protocol):
    """Persistence contract for base strings, keyed by (file, ordinal, identifier)."""

    def get(self, file: File, ordinal: int, identifier: str) -> SourceString | None: ...


@runtime_checkable
class TranslationRepository(Repository[Translation], Protocol):
    """Persistence contract for translation sets, keyed by set name."""

    def get(self, name: str) -> Translation | None: ...


@runtime_checkable
class TranslationStringRepository(Repository[TranslationString], Protocol):
    """Persistence contract for overrides, keyed by (translation, source string)."""

    def get(self, translation: Translation, source: SourceString) -> TranslationString | None: ...
