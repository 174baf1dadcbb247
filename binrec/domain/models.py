"""
Domain models for binrec.

Defines the fixed-layout record persisted by the storage layer. Field bounds
mirror `binrec.layout` so that any valid Record encodes without loss
and decodes back to an equal Record.
"""
from __future__ import annotations

import math
import struct
from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from binrec.layout import ID_MAX, ID_MIN, NAME_CAPACITY, NAME_ENCODING


def to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"score {value!r} is outside the float32 range") from exc


def check_score(value: float) -> float:
    """Validate a stored score: finite, within float32 range, rounded to float32."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"score must be finite, got {value!r}")
    return to_float32(value)


class Record(BaseModel):
    """
    One entry of a record file: a bounded name, an identifier and a score.
    """

    name: str = Field(..., description=f"Display name, at most {NAME_CAPACITY} UTF-8 bytes.")
    id: int = Field(..., ge=ID_MIN, le=ID_MAX, description="Identifier (int32, not unique).")
    score: float = Field(..., description="Finite score stored as float32.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("name")
    @classmethod
    def _fit_name(cls, value: str) -> str:
        # NUL terminates the name on disk
        if "\x00" in value:
            raise ValueError("name must not contain NUL characters")
        encoded = value.encode(NAME_ENCODING)
        if len(encoded) <= NAME_CAPACITY:
            return value
        # Drop any multi-byte character split by the cut.
        return encoded[:NAME_CAPACITY].decode(NAME_ENCODING, errors="ignore")

    @field_validator("score")
    @classmethod
    def _fit_score(cls, value: float) -> float:
        return check_score(value)

    @classmethod
    def blank(cls) -> "Record":
        """The zero record, used to pre-fill read buffers."""
        return cls(name="", id=0, score=0.0)

    def with_score(self, score: float) -> "Record":
        """Return a copy of this record with a different score."""
        return type(self)(name=self.name, id=self.id, score=score)


SAMPLE_RECORDS: Tuple[Record, ...] = (
    Record(name="Ann", id=1, score=90.5),
    Record(name="Bo", id=2, score=17.4),
    Record(name="Cy", id=3, score=67.2),
    Record(name="Di", id=4, score=81.3),
)


__all__ = ["Record", "SAMPLE_RECORDS", "check_score", "to_float32"]
