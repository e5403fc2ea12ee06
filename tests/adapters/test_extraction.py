from __future__ import annotations

from pathlib import Path

import pytest

from icetrans.adapters.extraction import (
    GuardedArchiveOpener,
    GuardedTextDecoder,
    build_decoders,
    load_callable,
)
from icetrans.config import ConfigurationError, ExtractionConfig, MissingConfigurationError
from icetrans.domain.errors import ExtractionError
from tests.helpers.catalog import decode_pairs


def _failing_opener(path: Path) -> list[object]:
    raise OSError(f"no such file: {path.name}")


def _failing_decoder(data: bytes) -> list[object]:
    raise ValueError("truncated chunk")


def test_load_callable_resolves_module_attribute() -> None:
    assert load_callable("tests.helpers.catalog:decode_pairs") is decode_pairs


@pytest.mark.parametrize(
    "import_path",
    [
        "tests.helpers.catalog",
        "tests.helpers.catalog:missing",
        "tests.helpers.absent_module:decode",
        "tests.helpers.catalog:HASH_A",
    ],
)
def test_load_callable_rejects_bad_paths(import_path: str) -> None:
    with pytest.raises(ConfigurationError):
        load_callable(import_path)


def test_guarded_opener_translates_os_errors() -> None:
    opener = GuardedArchiveOpener(_failing_opener)

    with pytest.raises(ExtractionError) as excinfo:
        opener(Path("win32") / "abc")

    assert excinfo.value.context == str(Path("win32") / "abc")


def test_guarded_decoder_translates_value_errors_and_passes_extraction_errors() -> None:
    with pytest.raises(ExtractionError, match="truncated chunk"):
        GuardedTextDecoder(_failing_decoder)(b"\x00")

    with pytest.raises(ExtractionError, match="bad text chunk"):
        GuardedTextDecoder(decode_pairs)(b"CORRUPT")


def test_build_decoders_from_config() -> None:
    config = ExtractionConfig(
        archive_opener="tests.helpers.catalog:FakeArchiveOpener",
        text_decoder="tests.helpers.catalog:decode_pairs",
    )

    _opener, decoder = build_decoders(config)

    assert [pair.identifier for pair in decoder(b"A=1\nB=2")] == ["A", "B"]


def test_build_decoders_requires_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ICETRANS_ARCHIVE_OPENER", raising=False)
    monkeypatch.setenv("ICETRANS_TEXT_DECODER", "tests.helpers.catalog:decode_pairs")

    with pytest.raises(MissingConfigurationError, match="ICETRANS_ARCHIVE_OPENER"):
        build_decoders()
