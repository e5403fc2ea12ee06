from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest  # noqa: TC002

from icetrans.config import get_database_config, get_input_config, get_storage_config
from icetrans.config.storage import DEFAULT_DB_FILENAME


def test_storage_config_prefers_explicit_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("ICETRANS_DATA_DIR", str(custom))

    config = get_storage_config()

    assert config.resolve_data_dir() == custom.resolve()


def test_database_config_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    assert get_database_config().uri == "sqlite:///override.db"


def test_database_config_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("ICETRANS_DATA_DIR", str(tmp_path / "data-dir"))

    uri = get_database_config().uri

    expected_path = (tmp_path / "data-dir" / DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_explicit_database_path_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    uri = get_database_config(database_path=tmp_path / "pso2.db").uri

    assert uri == f"sqlite+pysqlite:///{(tmp_path / 'pso2.db').resolve()}"


def test_input_encoding_defaults_to_utf8_with_bom(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ICETRANS_INPUT_ENCODING", raising=False)
    assert get_input_config().encoding == "utf-8-sig"

    monkeypatch.setenv("ICETRANS_INPUT_ENCODING", " cp932 ")
    assert get_input_config().encoding == "cp932"
