"""Readers for the archive list and strings CSV inputs.

Both inputs are read completely before any merging starts; every read fault
is fatal.
"""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from icetrans.adapters.aida.schema import STRING_ROW_FIELDS, StringRowPayload
from icetrans.config import get_input_config
from icetrans.domain.errors import InputReadError

if TYPE_CHECKING:
    from pathlib import Path

    from icetrans.domain.merge import StringRecord

log = getLogger(__name__)


def read_archive_list(path: Path, *, encoding: str | None = None) -> list[str]:
    """Return every line of the archive list."""

    resolved_encoding = encoding or get_input_config().encoding
    try:
        with path.open(encoding=resolved_encoding) as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"{path}: cannot read archive list: {exc}") from exc
    log.debug("Read %d archive list lines from %s", len(lines), path)
    return lines


def read_string_records(path: Path, *, encoding: str | None = None) -> list[StringRecord]:
    """Parse the strings CSV into records, in file order.

    Rows must have exactly five fields; leading whitespace (spaces, tabs) of
    each field is dropped and blank lines are ignored. There is no header row.
    """

    resolved_encoding = encoding or get_input_config().encoding
    records: list[StringRecord] = []
    try:
        with path.open(encoding=resolved_encoding, newline="") as handle:
            reader = csv.reader(handle, skipinitialspace=True, strict=True)
            for fields in reader:
                if not fields:
                    continue
                records.append(_parse_row(path, reader.line_num, fields))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise InputReadError(f"{path}: cannot read strings CSV: {exc}") from exc

    log.info("Read %d string records from %s", len(records), path)
    return records


def _parse_row(path: Path, line: int, fields: list[str]) -> StringRecord:
    if len(fields) != len(STRING_ROW_FIELDS):
        raise InputReadError(
            f"{path}:{line}: expected {len(STRING_ROW_FIELDS)} fields, found {len(fields)}"
        )
    try:
        payload = StringRowPayload.from_fields([field.lstrip() for field in fields])
    except ValidationError as exc:
        raise InputReadError(f"{path}:{line}: invalid row: {exc}") from exc
    return payload.to_record(line=line)
