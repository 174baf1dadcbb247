"""
Record file writer.

Serializes an in-memory sequence of records to a file in one bulk write,
replacing whatever the file held before.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from binrec.domain.models import Record
from binrec.storage.codec import encode_records
from binrec.utils.logging import get_logger

log = get_logger(__name__)


def write_records(path: Path | str, records: Sequence[Record]) -> Optional[int]:
    """
    Create or truncate `path` and write `records` in sequence order.

    Returns the number of records written, or None if the file could not be
    opened. Open failures are logged and never raised. Short writes are not
    detected.
    """
    path = Path(path)
    try:
        f = path.open("wb")
    except OSError as exc:
        log.error(
            f"Error occurred while writing file {path}: {exc.strerror or exc}",
            extra={"path": str(path), "error": str(exc)},
        )
        return None

    with f:
        f.write(encode_records(records))

    log.debug("Records written", extra={"path": str(path), "records": len(records)})
    return len(records)


__all__ = ["write_records"]
