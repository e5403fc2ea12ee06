"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from icetrans.adapters.sqlalchemy.mappings import (
    archive_table,
    file_table,
    source_string_table,
    translation_string_table,
    translation_table,
)
from icetrans.domain.model import (
    Archive,
    ArchiveName,
    File,
    SourceString,
    Translation,
    TranslationString,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyRepository[TEntity]:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: TEntity) -> None:
        self.session.add(entity)


class SqlAlchemyArchiveRepository(SqlAlchemyRepository[Archive]):
    def get(self, name: ArchiveName) -> Archive | None:
        stmt = (
            select(Archive)
            .where(archive_table.c.hash == name.hash)
            .where(archive_table.c.variant == name.variant)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyFileRepository(SqlAlchemyRepository[File]):
    def get(self, archive: Archive, name: str) -> File | None:
        stmt = (
            select(File)
            .where(file_table.c.archive_id == archive.id)
            .where(file_table.c.name == name)
        )
        return self.session.execute(stmt).unique().scalar_one_or_none()


class SqlAlchemySourceStringRepository(SqlAlchemyRepository[SourceString]):
    def get(self, file: File, ordinal: int, identifier: str) -> SourceString | None:
        stmt = (
            select(SourceString)
            .where(source_string_table.c.file_id == file.id)
            .where(source_string_table.c.identifier == identifier)
            .where(source_string_table.c.ordinal == ordinal)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyTranslationRepository(SqlAlchemyRepository[Translation]):
    def get(self, name: str) -> Translation | None:
        stmt = select(Translation).where(translation_table.c.name == name)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyTranslationStringRepository(SqlAlchemyRepository[TranslationString]):
    def get(self, translation: Translation, source: SourceString) -> TranslationString | None:
        stmt = (
            select(TranslationString)
            .where(translation_string_table.c.translation_id == translation.id)
            .where(translation_string_table.c.source_string_id == source.id)
        )
        return self.session.execute(stmt).scalar_one_or_none()


if TYPE_CHECKING:
    from icetrans.domain.ports.persistence import (
        ArchiveRepository,
        FileRepository,
        SourceStringRepository,
        TranslationRepository,
        TranslationStringRepository,
    )

    _session_stub = cast("Session", object())
    _archive_repo: ArchiveRepository = SqlAlchemyArchiveRepository(_session_stub)
    _file_repo: FileRepository = SqlAlchemyFileRepository(_session_stub)
    _string_repo: SourceStringRepository = SqlAlchemySourceStringRepository(_session_stub)
    _translation_repo: TranslationRepository = SqlAlchemyTranslationRepository(_session_stub)
    _ts_repo: TranslationStringRepository = SqlAlchemyTranslationStringRepository(_session_stub)
