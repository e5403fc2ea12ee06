"""Structured archive identifiers parsed from raw file names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Final

from icetrans.domain.errors import ParseError

_ARCHIVE_NAME_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<hash>[0-9a-fA-F]{32})(?:\.(?P<variant>[A-Za-z0-9_-]+))?"
)


@dataclass(frozen=True, slots=True)
class ArchiveName:
    """Catalog lookup key of an archive.

    ``hash`` is the 32 digit hexadecimal name of the archive file (lower case);
    ``variant`` is the optional suffix after a dot, ``""`` when absent.
    """

    hash: str
    variant: str = ""

    @classmethod
    def parse(cls, raw_name: str) -> ArchiveName:
        match = _ARCHIVE_NAME_RE.fullmatch(raw_name.strip())
        if match is None:
            raise ParseError("not a valid archive name", context=raw_name)
        return cls(hash=match["hash"].lower(), variant=match["variant"] or "")

    @classmethod
    def from_path(cls, path: str | PurePath) -> ArchiveName:
        return cls.parse(PurePath(path).name)

    def __str__(self) -> str:
        if self.variant:
            return f"{self.hash}.{self.variant}"
        return self.hash
