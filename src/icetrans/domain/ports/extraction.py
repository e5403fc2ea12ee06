"""Ports for the archive container and text-chunk decoders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

TEXT_FILE_TYPE: Final[str] = "text"


@dataclass(frozen=True, slots=True)
class ArchiveFile:
    name: str
    type: str
    data: bytes = field(repr=False)

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_FILE_TYPE


@dataclass(frozen=True, slots=True)
class ArchiveGroup:
    files: tuple[ArchiveFile, ...] = ()


@dataclass(frozen=True, slots=True)
class TextPair:
    identifier: str
    value: str


class ArchiveOpener(Protocol):
    """Open an archive file and return its groups, raising ExtractionError on failure."""

    def __call__(self, path: Path) -> Sequence[ArchiveGroup]: ...


class TextDecoder(Protocol):
    """Decode a text file payload into ordered pairs, raising ExtractionError on failure."""

    def __call__(self, data: bytes) -> Sequence[TextPair]: ...
