from __future__ import annotations

from pathlib import Path

import pytest

from icetrans.domain.errors import UnknownArchiveError
from icetrans.domain.merge import DirectImport, TranslationImport
from icetrans.ui import cli as cli_module


def test_archives_command_passes_base_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_import(paths: list[Path], **kwargs: object) -> None:
        captured["paths"] = paths
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "import_archives", fake_import)

    cli_module.main(["archives", "--version", "3", "data/a", "data/b"])

    assert captured["paths"] == [Path("data/a"), Path("data/b")]
    assert captured["mode"] == DirectImport(version=3)
    assert captured["database_uri"] is None


def test_archives_command_with_translation(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_import(paths: list[Path], **kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "import_archives", fake_import)

    cli_module.main(
        [
            "--database",
            str(tmp_path / "pso2.db"),
            "archives",
            "--version",
            "1",
            "--translation",
            "story-eng",
            "data/a",
        ]
    )

    assert captured["mode"] == TranslationImport(set_name="story-eng")
    assert captured["database_uri"] == f"sqlite+pysqlite:///{(tmp_path / 'pso2.db').resolve()}"


def test_csv_command_passes_inputs(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_import(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "import_translation_csv", fake_import)

    cli_module.main(
        [
            "csv",
            "--translation",
            "eng",
            "--archive-list",
            "skits.txt",
            "--strings",
            "strings.csv",
        ]
    )

    assert captured == {
        "archive_list": Path("skits.txt"),
        "strings": Path("strings.csv"),
        "translation": "eng",
        "database_uri": None,
    }


@pytest.mark.parametrize(
    "argv",
    [
        ["archives", "--version", "0", "data/a"],
        ["archives", "--version", "1", "--translation", "  ", "data/a"],
        ["archives", "data/a"],
        ["csv", "--translation", "eng", "--strings", "strings.csv"],
        [],
    ],
)
def test_invalid_arguments_exit_with_status_2(
    monkeypatch: pytest.MonkeyPatch,
    argv: list[str],
) -> None:
    def fake_import(*_: object, **__: object) -> None:
        raise AssertionError("import must not run")

    monkeypatch.setattr(cli_module, "import_archives", fake_import)
    monkeypatch.setattr(cli_module, "import_translation_csv", fake_import)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(argv)

    assert excinfo.value.code == 2


def test_fatal_error_exits_with_status_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_import(**_: object) -> None:
        raise UnknownArchiveError("story/chapter9")

    monkeypatch.setattr(cli_module, "import_translation_csv", fake_import)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            ["csv", "--translation", "eng", "--archive-list", "a.txt", "--strings", "b.csv"]
        )

    assert excinfo.value.code == 1
