"""Domain port definitions for adapters."""

from __future__ import annotations

from .extraction import (
    TEXT_FILE_TYPE,
    ArchiveFile,
    ArchiveGroup,
    ArchiveOpener,
    TextDecoder,
    TextPair,
)
from .persistence import (
    ArchiveRepository,
    FileRepository,
    Repository,
    SourceStringRepository,
    TranslationRepository,
    TranslationStringRepository,
)
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "TEXT_FILE_TYPE",
    "ArchiveFile",
    "ArchiveGroup",
    "ArchiveOpener",
    "ArchiveRepository",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "FileRepository",
    "Repository",
    "RepositoryCollection",
    "SourceStringRepository",
    "TextDecoder",
    "TextPair",
    "TranslationRepository",
    "TranslationStringRepository",
    "UnitOfWork",
]
