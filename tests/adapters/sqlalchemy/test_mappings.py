from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, inspect, select

from icetrans.adapters.sqlalchemy import create_all_tables, mapper_registry, start_mappers
from icetrans.adapters.sqlalchemy.mappings import archive_table
from icetrans.adapters.sqlalchemy.unit_of_work import create_catalog_engine
from icetrans.domain.model import Archive, ArchiveName, File
from tests.helpers.catalog import HASH_A

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session

CATALOG_TABLES = {"archive", "file", "source_string", "translation", "translation_string"}


def _columns(engine: Engine) -> dict[str, set[str]]:
    inspector = inspect(engine)
    return {
        name: {column["name"] for column in inspector.get_columns(name)}
        for name in inspector.get_table_names()
        if name in CATALOG_TABLES
    }


def test_start_mappers_is_idempotent() -> None:
    # First invocation happens in the sqlite_engine fixture; calling again should be harmless.
    assert start_mappers() is mapper_registry
    assert start_mappers() is mapper_registry


def test_migrations_match_mapped_metadata(sqlite_engine: Engine) -> None:
    fresh = create_catalog_engine("sqlite+pysqlite:///:memory:")
    try:
        create_all_tables(fresh)
        assert set(_columns(fresh)) == CATALOG_TABLES
        assert _columns(sqlite_engine) == _columns(fresh)
    finally:
        fresh.dispose()


def test_archive_name_is_stored_as_hash_and_variant(sqlite_session: Session) -> None:
    archive = Archive(name=ArchiveName(hash=HASH_A, variant="na"))
    sqlite_session.add_all([archive, File(archive=archive, name="ui_text.text")])
    sqlite_session.commit()

    row = sqlite_session.execute(select(archive_table.c.hash, archive_table.c.variant)).one()
    assert tuple(row) == (HASH_A, "na")
    assert sqlite_session.execute(select(func.count()).select_from(File)).scalar_one() == 1
