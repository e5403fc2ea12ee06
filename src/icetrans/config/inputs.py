"""Settings for reading the hand-authored import inputs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

DEFAULT_INPUT_ENCODING: Final[str] = "utf-8-sig"


@dataclass(frozen=True, slots=True)
class InputConfig:
    encoding: str = DEFAULT_INPUT_ENCODING


def get_input_config() -> InputConfig:
    encoding = os.getenv("ICETRANS_INPUT_ENCODING")
    if encoding and encoding.strip():
        return InputConfig(encoding=encoding.strip())
    return InputConfig()
