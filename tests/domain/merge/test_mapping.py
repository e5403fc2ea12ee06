from __future__ import annotations

import logging

import pytest

from icetrans.domain.merge import ExternalMappingLoader
from icetrans.domain.model import ArchiveName
from tests.helpers.catalog import HASH_A, HASH_B


def test_loader_maps_labels_to_archive_names() -> None:
    lines = [
        f"{HASH_A} hdr grp story/chapter1\n",
        f"{HASH_B}   hdr\tgrp   ui\n",
    ]

    archive_map = ExternalMappingLoader().load(lines)

    assert archive_map == {
        "story/chapter1": ArchiveName(hash=HASH_A),
        "ui": ArchiveName(hash=HASH_B),
    }


def test_loader_skips_malformed_lines_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    lines = [
        "# hand written list\n",
        f"{HASH_A} hdr grp\n",
        "zzzz hdr grp broken\n",
        "\n",
        f"{HASH_B} hdr grp ui extra\n",
        f"{HASH_A} hdr grp ok\n",
    ]

    with caplog.at_level(logging.WARNING):
        archive_map = ExternalMappingLoader().load(lines)

    assert archive_map == {"ok": ArchiveName(hash=HASH_A)}
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 4
    assert any("zzzz" in record.getMessage() for record in warnings)


def test_loader_keeps_last_line_for_repeated_label() -> None:
    lines = [f"{HASH_A} hdr grp ui\n", f"{HASH_B} hdr grp ui\n"]

    archive_map = ExternalMappingLoader().load(lines)

    assert archive_map == {"ui": ArchiveName(hash=HASH_B)}
