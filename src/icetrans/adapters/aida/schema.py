"""Pydantic models describing the hand-authored translation inputs."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from icetrans.domain.merge import StringRecord

STRING_ROW_FIELDS: Final[tuple[str, ...]] = ("path", "type", "zero_unk", "identifier", "value")


class AidaBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class StringRowPayload(AidaBaseModel):
    """One row of the strings CSV: ``path,type,zeroUnk,identifier,value``."""

    path: str = Field(min_length=1)
    type: str
    zero_unk: str
    identifier: str
    value: str

    @classmethod
    def from_fields(cls, fields: list[str]) -> StringRowPayload:
        return cls.model_validate(dict(zip(STRING_ROW_FIELDS, fields, strict=True)))

    def to_record(self, *, line: int | None = None) -> StringRecord:
        return StringRecord(
            path=self.path,
            type=self.type,
            zero_unk=self.zero_unk,
            identifier=self.identifier,
            value=self.value,
            line=line,
        )
