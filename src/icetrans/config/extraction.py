"""Configuration for the archive and text decoders used by the archive scan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import require_env_vars

ARCHIVE_OPENER_VAR: Final[str] = "ICETRANS_ARCHIVE_OPENER"
TEXT_DECODER_VAR: Final[str] = "ICETRANS_TEXT_DECODER"


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Import paths (``module:attribute``) of the decoder callables."""

    archive_opener: str
    text_decoder: str


def get_extraction_config() -> ExtractionConfig:
    values = require_env_vars((ARCHIVE_OPENER_VAR, TEXT_DECODER_VAR))
    return ExtractionConfig(
        archive_opener=values[ARCHIVE_OPENER_VAR],
        text_decoder=values[TEXT_DECODER_VAR],
    )
