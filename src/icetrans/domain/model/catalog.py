"""Localization catalog entities.

Ownership runs top-down: an Archive holds Files, a File holds SourceStrings.
A Translation is a named override set independent of any file; its
TranslationStrings each bind one SourceString to a localized value.
"""

from __future__ import annotations

from dataclasses import dataclass

from icetrans.domain.model.archive_name import ArchiveName  # noqa: TC001
from icetrans.domain.model.entity import Entity


@dataclass(eq=False, kw_only=True)
class Archive(Entity):
    name: ArchiveName

    def __str__(self) -> str:
        return str(self.name)


@dataclass(eq=False, kw_only=True)
class File(Entity):
    archive: Archive
    name: str

    @property
    def path(self) -> str:
        return f"{self.archive}: {self.name}"


@dataclass(eq=False, kw_only=True)
class SourceString(Entity):
    """Base-language entry for one (file, identifier, ordinal)."""

    file: File
    identifier: str
    ordinal: int
    value: str
    version: int

    def revise(self, value: str, *, version: int) -> None:
        self.value = value
        self.version = version


@dataclass(eq=False, kw_only=True)
class Translation(Entity):
    name: str


@dataclass(eq=False, kw_only=True)
class TranslationString(Entity):
    translation: Translation
    source: SourceString
    value: str
