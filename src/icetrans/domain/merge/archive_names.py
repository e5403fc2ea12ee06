"""Resolution of raw archive file names and labels into catalog keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from icetrans.domain.model import ArchiveName

if TYPE_CHECKING:
    from pathlib import PurePath


class ArchiveNameResolver:
    """Parse raw names into ``ArchiveName`` keys.

    Used for archive paths on the scan side and for the raw names listed in the
    archive list on the CSV side. Parse failures propagate as ``ParseError``.
    """

    def parse(self, raw_name: str) -> ArchiveName:
        return ArchiveName.parse(raw_name)

    def parse_path(self, path: str | PurePath) -> ArchiveName:
        return ArchiveName.from_path(path)
