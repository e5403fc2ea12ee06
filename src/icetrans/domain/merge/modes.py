"""Import modes: how one incoming string is merged into the catalog.

Both arms share the same contract: resolve the source string, compare its
stored value with the incoming one, then act (or do nothing when equal).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from icetrans.domain.errors import MissingCatalogEntryError
from icetrans.domain.merge.results import MergeAction

if TYPE_CHECKING:
    from icetrans.domain.merge.catalog import Catalog
    from icetrans.domain.model import File


class MergeStrategy(Protocol):
    def merge(
        self,
        catalog: Catalog,
        *,
        file: File,
        ordinal: int,
        identifier: str,
        value: str,
    ) -> MergeAction: ...

    def describe(self) -> str: ...


@dataclass(frozen=True, slots=True)
class DirectImport:
    """Base import: strings are created or overwritten and tagged with ``version``."""

    version: int

    def merge(
        self,
        catalog: Catalog,
        *,
        file: File,
        ordinal: int,
        identifier: str,
        value: str,
    ) -> MergeAction:
        source = catalog.find_string(file, ordinal, identifier)
        if source is None:
            catalog.insert_string(
                file,
                version=self.version,
                ordinal=ordinal,
                identifier=identifier,
                value=value,
            )
            return MergeAction.INSERTED_STRING
        if source.value == value:
            return MergeAction.NOOP
        catalog.update_string(source, version=self.version, value=value)
        return MergeAction.UPDATED_STRING

    def describe(self) -> str:
        return f"base import v{self.version}"


@dataclass(frozen=True, slots=True)
class TranslationImport:
    """Translation import: values differing from the base string become overrides.

    Never creates source strings; a missing one is a recoverable error.
    """

    set_name: str

    def merge(
        self,
        catalog: Catalog,
        *,
        file: File,
        ordinal: int,
        identifier: str,
        value: str,
    ) -> MergeAction:
        source = catalog.find_string(file, ordinal, identifier)
        if source is None:
            raise MissingCatalogEntryError(
                "translated identifier does not exist",
                context=f"{file.name}: {identifier}",
            )
        if source.value == value:
            return MergeAction.NOOP
        translation = catalog.ensure_translation(self.set_name)
        return catalog.upsert_translation_string(translation, source, value)

    def describe(self) -> str:
        return f"translation `{self.set_name}`"


type ImportMode = DirectImport | TranslationImport


def import_mode(*, version: int, translation: str | None = None) -> ImportMode:
    """Select the mode of an archive scan: translation import when a set name is given."""

    if translation:
        return TranslationImport(set_name=translation)
    return DirectImport(version=version)


if TYPE_CHECKING:
    _direct_check: MergeStrategy = DirectImport(version=1)
    _translation_check: MergeStrategy = TranslationImport(set_name="eng")
