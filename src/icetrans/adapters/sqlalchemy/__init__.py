"""SQLAlchemy adapter package for icetrans."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyArchiveRepository,
    SqlAlchemyFileRepository,
    SqlAlchemySourceStringRepository,
    SqlAlchemyTranslationRepository,
    SqlAlchemyTranslationStringRepository,
)
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    create_catalog_engine,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyArchiveRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyFileRepository",
    "SqlAlchemySourceStringRepository",
    "SqlAlchemyTranslationRepository",
    "SqlAlchemyTranslationStringRepository",
    "create_all_tables",
    "create_catalog_engine",
    "mapper_registry",
    "start_mappers",
    "shutdown",
    "startup",
]
