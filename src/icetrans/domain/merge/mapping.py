"""Archive list parsing: labels used by the CSV mapped to archive names."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from icetrans.domain.errors import ParseError
from icetrans.domain.merge.archive_names import ArchiveNameResolver

if TYPE_CHECKING:
    from collections.abc import Iterable

    from icetrans.domain.model import ArchiveName

log = getLogger(__name__)

FIELDS_PER_LINE: Final[int] = 4

type ArchiveMap = dict[str, ArchiveName]


@dataclass(slots=True)
class ExternalMappingLoader:
    """Build the label lookup from hand-authored archive list lines.

    Each line reads ``<raw archive name> <header> <group> <label>``. The list
    is expected to be noisy: lines with another token count or an unparseable
    archive name are reported and skipped. A later line for a label replaces an
    earlier one.
    """

    resolver: ArchiveNameResolver = field(default_factory=ArchiveNameResolver)

    def load(self, lines: Iterable[str]) -> ArchiveMap:
        archive_map: ArchiveMap = {}
        skipped = 0
        for number, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) != FIELDS_PER_LINE:
                log.warning(
                    "Archive list line %d: expected %d fields, found %d",
                    number,
                    FIELDS_PER_LINE,
                    len(tokens),
                )
                skipped += 1
                continue

            raw_archive, _header, _group, label = tokens
            try:
                archive_map[label] = self.resolver.parse(raw_archive)
            except ParseError as exc:
                log.warning("Archive list line %d: %s", number, exc)
                skipped += 1

        log.info("Loaded %d archive labels (%d lines skipped)", len(archive_map), skipped)
        return archive_map
