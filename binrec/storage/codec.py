"""
Record <-> bytes conversion for the layout described in `binrec.layout`.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from binrec.domain.models import Record
from binrec.layout import NAME_ENCODING, RECORD_SIZE, RECORD_STRUCT


def encode_record(record: Record) -> bytes:
    """Pack one record into exactly RECORD_SIZE bytes."""
    # struct pads the 25s field with NULs; Record already bounds the length.
    return RECORD_STRUCT.pack(record.name.encode(NAME_ENCODING), record.id, record.score)


def encode_records(records: Iterable[Record]) -> bytes:
    return b"".join(encode_record(r) for r in records)


def decode_record(buf: bytes) -> Record:
    """
    Unpack one record from a RECORD_SIZE buffer.

    Bytes of the name that are not valid UTF-8 are dropped. Raises
    pydantic.ValidationError for a score that is not finite.
    """
    raw_name, rec_id, score = RECORD_STRUCT.unpack(buf)
    name = raw_name.split(b"\x00", 1)[0].decode(NAME_ENCODING, errors="ignore")
    return Record(name=name, id=rec_id, score=score)


def iter_decode(data: bytes) -> Iterator[Record]:
    """
    Yield every complete record in `data`.

    A trailing fragment shorter than RECORD_SIZE is not decoded; callers that
    care compare len(data) against RECORD_SIZE themselves.
    """
    for offset in range(0, len(data) - RECORD_SIZE + 1, RECORD_SIZE):
        yield decode_record(data[offset : offset + RECORD_SIZE])


__all__ = ["decode_record", "encode_record", "encode_records", "iter_decode"]
