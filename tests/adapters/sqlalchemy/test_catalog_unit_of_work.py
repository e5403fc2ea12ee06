from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from icetrans.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    configured_engine,
    create_catalog_engine,
    is_started,
    shutdown,
    startup,
)
from icetrans.domain.errors import StorageError
from icetrans.domain.merge import Catalog
from icetrans.domain.model import Archive, ArchiveName, Translation
from tests.helpers.catalog import HASH_A

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_unit_of_work_requires_startup() -> None:
    assert not is_started()
    with pytest.raises(StartupError):
        SqlAlchemyCatalogUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_catalog_engine("sqlite+pysqlite:///:memory:")
    engine_b = create_catalog_engine("sqlite+pysqlite:///:memory:")

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b


def test_rollback_discards_uncommitted_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.translations.add(Translation(name="eng"))
        uow.rollback()

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.translations.get("eng") is None


def test_exception_in_block_rolls_back(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    with pytest.raises(RuntimeError), sqlite_unit_of_work() as uow:
        uow.repositories.translations.add(Translation(name="eng"))
        raise RuntimeError("boom")

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.translations.get("eng") is None


def test_failed_savepoint_only_undoes_its_own_step(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.archives.add(Archive(name=ArchiveName(hash=HASH_A)))
        uow.commit()

    with sqlite_unit_of_work() as uow:
        with uow.savepoint():
            uow.repositories.translations.add(Translation(name="eng"))

        with pytest.raises(StorageError), uow.savepoint():
            uow.repositories.archives.add(Archive(name=ArchiveName(hash=HASH_A)))

        uow.commit()

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.translations.get("eng") is not None


def test_get_or_create_resolves_conflict_to_existing_row(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        catalog = Catalog(uow)
        first = catalog.ensure_archive(ArchiveName(hash=HASH_A))
        second = catalog.ensure_archive(ArchiveName(hash=HASH_A))
        uow.commit()

    assert first is second
