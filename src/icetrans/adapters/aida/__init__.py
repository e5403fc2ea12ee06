"""Readers for externally authored (AIDA) translation inputs."""

from __future__ import annotations

from .reader import read_archive_list, read_string_records
from .schema import StringRowPayload

__all__ = ["StringRowPayload", "read_archive_list", "read_string_records"]
