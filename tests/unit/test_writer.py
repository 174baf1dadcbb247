from __future__ import annotations

import logging

from binrec.domain.models import Record
from binrec.layout import RECORD_SIZE
from binrec.storage.codec import encode_records
from binrec.storage.writer import write_records


def test_write_records_writes_raw_layout(data_file, sample_records) -> None:
    written = write_records(data_file, sample_records)

    assert written == len(sample_records)
    assert data_file.read_bytes() == encode_records(sample_records)
    assert data_file.stat().st_size == len(sample_records) * RECORD_SIZE


def test_write_records_accepts_str_path(data_file, sample_records) -> None:
    assert write_records(str(data_file), sample_records) == len(sample_records)
    assert data_file.exists()


def test_write_records_truncates_existing_content(data_file, sample_records) -> None:
    data_file.write_bytes(b"\xff" * (10 * RECORD_SIZE))

    write_records(data_file, sample_records[:1])

    assert data_file.read_bytes() == encode_records(sample_records[:1])


def test_write_is_idempotent(data_file, sample_records) -> None:
    write_records(data_file, sample_records)
    first = data_file.read_bytes()
    write_records(data_file, sample_records)

    assert data_file.read_bytes() == first


def test_write_empty_sequence_creates_empty_file(data_file) -> None:
    assert write_records(data_file, []) == 0
    assert data_file.read_bytes() == b""


def test_write_open_failure_is_logged_not_raised(unopenable_path, sample_records, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="binrec.storage.writer"):
        result = write_records(unopenable_path, sample_records)

    assert result is None
    assert not unopenable_path.exists()
    assert any(
        r.levelno == logging.ERROR and "writing file" in r.getMessage() for r in caplog.records
    )


def test_write_preserves_record_order(data_file) -> None:
    records = [Record(name=f"r{i}", id=i, score=float(i)) for i in range(5, 0, -1)]
    write_records(data_file, records)

    data = data_file.read_bytes()
    assert data[:RECORD_SIZE] == encode_records(records[:1])
