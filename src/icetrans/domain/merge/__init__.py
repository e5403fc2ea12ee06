"""Translation merge engine."""

from __future__ import annotations

from .archive_names import ArchiveNameResolver
from .catalog import Catalog
from .collisions import IdentifierCollisionTracker
from .direct import DirectImportMerger
from .mapping import ArchiveMap, ExternalMappingLoader
from .modes import DirectImport, ImportMode, MergeStrategy, TranslationImport, import_mode
from .results import (
    ArchiveImportResult,
    ArchiveScanSummary,
    MergeAction,
    MergeStats,
    PartialResult,
)
from .transaction import TransactionScope
from .translation_csv import StringRecord, TranslationMergeImporter

__all__ = [
    "ArchiveImportResult",
    "ArchiveMap",
    "ArchiveNameResolver",
    "ArchiveScanSummary",
    "Catalog",
    "DirectImport",
    "DirectImportMerger",
    "ExternalMappingLoader",
    "IdentifierCollisionTracker",
    "ImportMode",
    "MergeAction",
    "MergeStats",
    "MergeStrategy",
    "PartialResult",
    "StringRecord",
    "TransactionScope",
    "TranslationImport",
    "TranslationMergeImporter",
    "import_mode",
]
