"""
Record file reader.

Decodes fixed-size records from a file into a caller-owned buffer, the way
`readinto` fills a bytearray: the buffer's length is the capacity, and only
the slots that were actually read are overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, MutableSequence, Optional

from pydantic import ValidationError

from binrec.domain.models import Record
from binrec.layout import RECORD_SIZE
from binrec.storage.codec import iter_decode
from binrec.utils.logging import get_logger

log = get_logger(__name__)


def allocate_buffer(count: int) -> List[Record]:
    """Return a buffer of `count` blank records."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [Record.blank() for _ in range(count)]


def read_records_into(path: Path | str, buffer: MutableSequence[Record]) -> Optional[int]:
    """
    Read up to len(buffer) records from `path` into buffer[0:k].

    Returns k, the number of complete records read, or None if the file could
    not be opened. On an open failure the error is logged and the buffer is
    left untouched. Reading stops, with an error logged, at the first record
    whose contents fail validation.
    """
    path = Path(path)
    try:
        f = path.open("rb")
    except OSError as exc:
        log.error(
            f"Error occurred while reading file {path}: {exc.strerror or exc}",
            extra={"path": str(path), "error": str(exc)},
        )
        return None

    with f:
        data = f.read(len(buffer) * RECORD_SIZE)

    count = 0
    try:
        for count, record in enumerate(iter_decode(data), start=1):
            buffer[count - 1] = record
    except ValidationError as exc:
        # Records after an invalid one are not read.
        log.error(
            f"Invalid record at index {count} in {path}: {exc.errors()[0]['msg']}",
            extra={"path": str(path), "index": count},
        )
        return count

    leftover = len(data) - count * RECORD_SIZE
    if leftover:
        log.warning(
            f"Ignoring {leftover} trailing bytes in {path} (incomplete record)",
            extra={"path": str(path), "trailing_bytes": leftover},
        )

    log.debug(
        "Records read",
        extra={"path": str(path), "records": count, "capacity": len(buffer)},
    )
    return count


def count_records(path: Path | str) -> int:
    """Number of complete records a file holds, judged by its size."""
    return Path(path).stat().st_size // RECORD_SIZE


__all__ = ["allocate_buffer", "count_records", "read_records_into"]
