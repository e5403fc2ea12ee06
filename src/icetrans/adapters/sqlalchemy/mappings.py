"""SQLAlchemy mapping metadata for the catalog model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers, relationship

from icetrans.domain.model import (
    Archive,
    ArchiveName,
    File,
    SourceString,
    Translation,
    TranslationString,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

archive_table = Table(
    "archive",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("hash", String(32), nullable=False),
    Column("variant", String, nullable=False, default=""),
    UniqueConstraint("hash", "variant"),
)

file_table = Table(
    "file",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "archive_id",
        UUIDColumnType,
        ForeignKey("archive.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String, nullable=False),
    UniqueConstraint("archive_id", "name"),
)

source_string_table = Table(
    "source_string",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "file_id",
        UUIDColumnType,
        ForeignKey("file.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("identifier", String, nullable=False),
    Column("ordinal", Integer, nullable=False),
    Column("value", Text, nullable=False),
    Column("version", Integer, nullable=False),
    UniqueConstraint("file_id", "identifier", "ordinal"),
)

translation_table = Table(
    "translation",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    UniqueConstraint("name"),
)

translation_string_table = Table(
    "translation_string",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "translation_id",
        UUIDColumnType,
        ForeignKey("translation.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "source_string_id",
        UUIDColumnType,
        ForeignKey("source_string.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", Text, nullable=False),
    UniqueConstraint("translation_id", "source_string_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Map the catalog dataclasses onto their tables (idempotent)."""

    mapper_registry.map_imperatively(
        Archive,
        archive_table,
        properties={
            "name": composite(ArchiveName, archive_table.c.hash, archive_table.c.variant),
        },
    )

    mapper_registry.map_imperatively(
        File,
        file_table,
        properties={
            "archive": relationship(Archive, lazy="joined"),
        },
    )

    mapper_registry.map_imperatively(
        SourceString,
        source_string_table,
        properties={
            "file": relationship(File),
        },
    )

    mapper_registry.map_imperatively(
        Translation,
        translation_table,
    )

    mapper_registry.map_imperatively(
        TranslationString,
        translation_string_table,
        properties={
            "translation": relationship(Translation),
            "source": relationship(SourceString),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
