"""Loading of the external archive and text decoders.

The decoders are not part of icetrans; they are configured as
``module:attribute`` import paths and wrapped so that their failures surface as
recoverable ``ExtractionError``s.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, cast

from icetrans.config import ConfigurationError, get_extraction_config
from icetrans.domain.errors import ExtractionError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from icetrans.config import ExtractionConfig
    from icetrans.domain.ports.extraction import (
        ArchiveGroup,
        ArchiveOpener,
        TextDecoder,
        TextPair,
    )

log = getLogger(__name__)


def load_callable(import_path: str) -> Callable[..., object]:
    """Resolve ``package.module:attribute`` to a callable."""

    module_name, _, attribute = import_path.partition(":")
    if not module_name or not attribute:
        raise ConfigurationError(f"Expected 'module:attribute', got {import_path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import {module_name!r}: {exc}") from exc

    target: object = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(f"{import_path!r} does not exist") from exc
    if not callable(target):
        raise ConfigurationError(f"{import_path!r} is not callable")
    return cast("Callable[..., object]", target)


@dataclass(frozen=True, slots=True)
class GuardedArchiveOpener:
    opener: Callable[[Path], Sequence[ArchiveGroup]]

    def __call__(self, path: Path) -> Sequence[ArchiveGroup]:
        try:
            return self.opener(path)
        except ExtractionError:
            raise
        except (OSError, ValueError) as exc:
            raise ExtractionError(f"cannot open archive: {exc}", context=str(path)) from exc


@dataclass(frozen=True, slots=True)
class GuardedTextDecoder:
    decoder: Callable[[bytes], Sequence[TextPair]]

    def __call__(self, data: bytes) -> Sequence[TextPair]:
        try:
            return self.decoder(data)
        except ExtractionError:
            raise
        except (OSError, ValueError) as exc:
            raise ExtractionError(f"cannot decode text file: {exc}") from exc


def build_decoders(config: ExtractionConfig | None = None) -> tuple[ArchiveOpener, TextDecoder]:
    """Load the configured decoders, wrapped for error translation."""

    effective = config or get_extraction_config()
    opener = cast("Callable[[Path], Sequence[ArchiveGroup]]", load_callable(effective.archive_opener))
    decoder = cast("Callable[[bytes], Sequence[TextPair]]", load_callable(effective.text_decoder))
    log.debug(
        "Loaded archive opener %s and text decoder %s",
        effective.archive_opener,
        effective.text_decoder,
    )
    return GuardedArchiveOpener(opener), GuardedTextDecoder(decoder)
