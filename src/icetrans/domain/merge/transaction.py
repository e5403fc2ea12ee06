"""Transaction brackets around one ingestion unit and their partial results."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal

from icetrans.domain.errors import TransactionStateError
from icetrans.domain.merge.results import PartialResult

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from icetrans.domain.errors import RecoverableImportError
    from icetrans.domain.merge.results import MergeAction
    from icetrans.domain.ports.unit_of_work import CatalogUnitOfWork

log = getLogger(__name__)


class TransactionScope:
    """Bracket the storage mutations of one file or one CSV pass.

    Leaving the block normally commits every step applied so far, including
    when a recoverable error abandoned the rest of the unit. Leaving it with an
    exception rolls everything back. Brackets are neither reentrant nor
    nestable on the same unit of work.
    """

    def __init__(self, uow: CatalogUnitOfWork, *, label: str) -> None:
        self._uow = uow
        self._entered = False
        self._open = False
        self.result = PartialResult(label=label)

    def __enter__(self) -> TransactionScope:
        if self._entered or self._uow.bracket_open:
            raise TransactionStateError(f"{self.result.label}: transaction already open")
        self._uow.bracket_open = True
        self._entered = True
        self._open = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        self._uow.bracket_open = False
        self._open = False
        if exc_type is not None:
            log.debug("Rolling back %s after %s", self.result.label, exc_type.__name__)
            self._uow.rollback()
            return False
        self._uow.commit()
        self.result.committed = True
        return False

    def apply(self, merge: Callable[[], MergeAction]) -> MergeAction:
        """Run one merge step inside a savepoint and record its action."""

        if not self._open:
            raise TransactionStateError(f"{self.result.label}: transaction not open")
        with self._uow.savepoint():
            action = merge()
        self.result.applied += 1
        self.result.stats.record(action)
        return action

    def skip(self, error: RecoverableImportError) -> None:
        """Record a unit skipped because of ``error``; the bracket stays open."""

        self.result.errors.append(error)
        self.result.stats.skipped += 1

    def abandon(self, error: RecoverableImportError) -> None:
        """Record ``error`` as the reason the remaining steps are dropped."""

        self.skip(error)
        self.result.abandoned = True
