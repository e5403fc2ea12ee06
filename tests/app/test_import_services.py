from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from icetrans import app
from icetrans.domain.errors import InputReadError
from icetrans.domain.merge import DirectImport
from icetrans.domain.ports.extraction import ArchiveGroup
from tests.helpers.catalog import HASH_A, FakeArchiveOpener, decode_pairs, text_file

if TYPE_CHECKING:
    from collections.abc import Callable

    from icetrans.adapters.sqlalchemy.unit_of_work import SqlAlchemyCatalogUnitOfWork


def _seed_catalog(factory: Callable[[], SqlAlchemyCatalogUnitOfWork]) -> None:
    opener = FakeArchiveOpener(
        {HASH_A: [ArchiveGroup(files=(text_file("ui_text.text", [("GREET", "Konnichiwa")]),))]}
    )
    summary = app.import_archives(
        [Path("win32") / HASH_A],
        mode=DirectImport(version=1),
        open_archive=opener,
        decode_text=decode_pairs,
        unit_of_work_factory=factory,
    )
    assert summary.stats.inserted == 1


def test_import_translation_csv_end_to_end(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    tmp_path: Path,
) -> None:
    _seed_catalog(sqlite_unit_of_work)
    archive_list = tmp_path / "skits.txt"
    archive_list.write_text(f"{HASH_A} hdr grp ui\nnot a valid line at all\n", encoding="utf-8")
    strings = tmp_path / "strings.csv"
    strings.write_text(
        "ui/ui_text.text,text,0,GREET,Hello\nui/ui_text.text,text,0,BYE,Goodbye\n",
        encoding="utf-8",
    )

    result = app.import_translation_csv(
        archive_list=archive_list,
        strings=strings,
        translation="eng",
        unit_of_work_factory=sqlite_unit_of_work,
    )

    assert result.committed_count == 1
    assert result.stats.skipped == 1
    with sqlite_unit_of_work() as uow:
        translation = uow.repositories.translations.get("eng")
        assert translation is not None


def test_import_translation_csv_reads_inputs_before_touching_storage(tmp_path: Path) -> None:
    def factory() -> SqlAlchemyCatalogUnitOfWork:
        raise AssertionError("storage must not be opened")

    archive_list = tmp_path / "skits.txt"
    archive_list.write_text(f"{HASH_A} hdr grp ui\n", encoding="utf-8")
    strings = tmp_path / "strings.csv"
    strings.write_text("ui/ui_text.text,text,0,GREET\n", encoding="utf-8")

    with pytest.raises(InputReadError):
        app.import_translation_csv(
            archive_list=archive_list,
            strings=strings,
            translation="eng",
            unit_of_work_factory=factory,
        )
