"""Public domain model surface."""

from __future__ import annotations

from icetrans.domain.model.archive_name import ArchiveName
from icetrans.domain.model.catalog import (
    Archive,
    File,
    SourceString,
    Translation,
    TranslationString,
)
from icetrans.domain.model.entity import Entity

__all__ = [
    "Archive",
    "ArchiveName",
    "Entity",
    "File",
    "SourceString",
    "Translation",
    "TranslationString",
]
