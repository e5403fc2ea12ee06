"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from types import TracebackType

    from icetrans.domain.ports.persistence import (
        ArchiveRepository,
        FileRepository,
        SourceStringRepository,
        TranslationRepository,
        TranslationStringRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Generic unit-of-work boundary around a repository collection.

    ``bracket_open`` is set while a transaction bracket is active on this unit of
    work; brackets use it to refuse nesting.
    """

    bracket_open: bool

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def savepoint(self) -> AbstractContextManager[None]:
        """Scope one storage step; failures roll back the step only and raise StorageError."""
        ...


@dataclass(slots=True)
class CatalogRepositories(RepositoryCollection):
    """Repositories required to merge strings into the catalog."""

    archives: ArchiveRepository
    files: FileRepository
    source_strings: SourceStringRepository
    translations: TranslationRepository
    translation_strings: TranslationStringRepository


type CatalogUnitOfWork = UnitOfWork[CatalogRepositories]
