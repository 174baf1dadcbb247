"""
Scanner: apply an update rule to the records held in a read buffer.

Usage:
    from binrec.scanner import read_and_scan

    result = read_and_scan("data.bin", count=4)
    if result is not None and result.found:
        ...

The scan covers exactly the records that were read, never the whole buffer
capacity, so blank slots past a short read are not visited.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, MutableSequence, Optional

from binrec.domain.models import Record
from binrec.rules.abstract import UpdateRule
from binrec.rules.score_override import ScoreOverrideRule
from binrec.storage.reader import allocate_buffer, read_records_into
from binrec.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class ScanResult:
    """
    Outcome of one scan.

    `records` holds the scanned records after the rule ran; `matched` holds
    their buffer indices that the rule rewrote.
    """

    records: List[Record] = field(default_factory=list)
    matched: List[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.matched)


def apply_rule(
    buffer: MutableSequence[Record],
    rule: UpdateRule,
    count: Optional[int] = None,
) -> ScanResult:
    """
    Run `rule` over buffer[0:count], replacing matching records in place.

    Parameters
    ----------
    buffer : MutableSequence[Record]
        Records to scan; matching slots are overwritten with the rule's output.
    rule : UpdateRule
        Decides which records change and how.
    count : int | None
        Number of leading records to scan. Defaults to len(buffer).
    """
    if count is None:
        count = len(buffer)
    if not 0 <= count <= len(buffer):
        raise ValueError(f"count must be between 0 and {len(buffer)}, got {count}")

    result = ScanResult()
    for index in range(count):
        record = buffer[index]
        if rule.matches(record):
            record = rule.apply(record)
            buffer[index] = record
            result.matched.append(index)
        result.records.append(record)

    log.debug(
        f"[SCAN] {rule.name}: {len(result.matched)}/{count} matched",
        extra={"rule": rule.name, "scanned": count, "matched": len(result.matched)},
    )
    return result


def read_and_scan(
    path: Path | str,
    count: int,
    rule: Optional[UpdateRule] = None,
) -> Optional[ScanResult]:
    """
    Read up to `count` records from `path` into a blank buffer and apply
    `rule` (the configured score override by default) to those read.

    Returns None when the file could not be opened.
    """
    if rule is None:
        rule = ScoreOverrideRule.from_settings()

    buffer = allocate_buffer(count)
    read = read_records_into(path, buffer)
    if read is None:
        return None

    if read < count:
        log.info(
            f"Read {read} of {count} requested records from {path}",
            extra={"path": str(path), "requested": count, "read": read},
        )
    return apply_rule(buffer, rule, count=read)


__all__ = ["ScanResult", "apply_rule", "read_and_scan"]
