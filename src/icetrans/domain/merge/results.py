"""Outcome records of merge passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from icetrans.domain.errors import RecoverableImportError
    from icetrans.domain.model import ArchiveName


class MergeAction(StrEnum):
    NOOP = "noop"
    INSERTED_STRING = "inserted_string"
    UPDATED_STRING = "updated_string"
    INSERTED_TRANSLATION = "inserted_translation"
    UPDATED_TRANSLATION = "updated_translation"


@dataclass(slots=True)
class MergeStats:
    inserted: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0

    @property
    def mutations(self) -> int:
        return self.inserted + self.updated

    def record(self, action: MergeAction) -> None:
        match action:
            case MergeAction.NOOP:
                self.unchanged += 1
            case MergeAction.INSERTED_STRING | MergeAction.INSERTED_TRANSLATION:
                self.inserted += 1
            case MergeAction.UPDATED_STRING | MergeAction.UPDATED_TRANSLATION:
                self.updated += 1

    def absorb(self, other: MergeStats) -> None:
        self.inserted += other.inserted
        self.updated += other.updated
        self.unchanged += other.unchanged
        self.skipped += other.skipped

    @classmethod
    def total(cls, parts: Iterable[MergeStats]) -> MergeStats:
        combined = cls()
        for part in parts:
            combined.absorb(part)
        return combined


@dataclass(slots=True)
class PartialResult:
    """Outcome of one transaction bracket.

    ``applied`` counts merge steps that succeeded inside the bracket; they only
    count as committed once the bracket closed normally. ``abandoned`` is set
    when a recoverable error stopped the remaining steps of the unit.
    """

    label: str
    stats: MergeStats = field(default_factory=MergeStats)
    errors: list[RecoverableImportError] = field(default_factory=list["RecoverableImportError"])
    applied: int = 0
    committed: bool = False
    abandoned: bool = False

    @property
    def committed_count(self) -> int:
        return self.applied if self.committed else 0

    @property
    def first_error(self) -> RecoverableImportError | None:
        return self.errors[0] if self.errors else None

    @property
    def complete(self) -> bool:
        return self.committed and not self.errors


@dataclass(slots=True)
class ArchiveImportResult:
    name: ArchiveName
    files: list[PartialResult] = field(default_factory=list[PartialResult])
    errors: list[RecoverableImportError] = field(default_factory=list["RecoverableImportError"])

    @property
    def stats(self) -> MergeStats:
        return MergeStats.total(result.stats for result in self.files)


@dataclass(slots=True)
class ArchiveScanSummary:
    archives: list[ArchiveImportResult] = field(default_factory=list[ArchiveImportResult])
    errors: list[RecoverableImportError] = field(default_factory=list["RecoverableImportError"])

    @property
    def stats(self) -> MergeStats:
        return MergeStats.total(archive.stats for archive in self.archives)

    @property
    def files(self) -> list[PartialResult]:
        return [result for archive in self.archives for result in archive.files]

    @property
    def all_errors(self) -> list[RecoverableImportError]:
        collected = list(self.errors)
        for archive in self.archives:
            collected.extend(archive.errors)
            for result in archive.files:
                collected.extend(result.errors)
        return collected
