"""Error hierarchy for catalog imports.

Fatal errors abort a whole run. Recoverable errors are reported with the
archive/file/identifier path they concern and only skip the affected unit.
"""

from __future__ import annotations

from typing import Self


class IcetransError(Exception):
    """Base class for all import errors."""


class FatalImportError(IcetransError):
    """Aborts the run before further work is done."""


class RecoverableImportError(IcetransError):
    """Skips one archive, file or record; sibling units keep going."""

    def __init__(self, message: str, *, context: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def with_context(self, context: str) -> Self:
        """Attach ``context`` unless the raiser already provided a more precise one."""

        if self.context is None:
            self.context = context
        return self

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class ParseError(RecoverableImportError):
    """Raised when a raw archive name does not follow the archive naming grammar."""


class MissingCatalogEntryError(RecoverableImportError):
    """Raised when an archive, file or source string is absent from the catalog."""


class StorageError(RecoverableImportError):
    """Raised when a single storage operation fails."""


class ExtractionError(RecoverableImportError):
    """Raised when an archive cannot be opened or a text file cannot be decoded."""


class UnknownArchiveError(FatalImportError):
    """Raised when a CSV path refers to an archive label missing from the archive list."""

    def __init__(self, label: str) -> None:
        super().__init__(f"{label}: unknown archive name")
        self.label = label


class InputReadError(FatalImportError):
    """Raised when a required input (archive list, strings CSV) cannot be read."""


class TransactionStateError(FatalImportError):
    """Raised when a transaction bracket is re-entered or nested."""
