"""
Pytest configuration for binrec.

Provides fixtures for:
- Settings isolation (environment and cache)
- Root logging isolation
- Sample records and data file locations
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator, List

import pytest

from binrec.config import get_settings
from binrec.domain.models import SAMPLE_RECORDS, Record
from binrec.storage.writer import write_records

_ENV_VARS = (
    "BINREC_DATA_FILE",
    "BINREC_RECORD_COUNT",
    "BINREC_MATCH_ID",
    "BINREC_OVERRIDE_SCORE",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Run every test with default settings and no stray .env file.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo configure_logging() calls so handlers bound to captured streams do
    not outlive the test that created them.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_records() -> List[Record]:
    return list(SAMPLE_RECORDS)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.bin"


@pytest.fixture
def written_file(data_file: Path, sample_records: List[Record]) -> Path:
    """
    A data file holding the four sample records.
    """
    assert write_records(data_file, sample_records) == len(sample_records)
    return data_file


@pytest.fixture
def unopenable_path(tmp_path: Path) -> Path:
    """
    A path whose parent directory does not exist, so open() fails for both
    reading and writing regardless of the user's privileges.
    """
    return tmp_path / "no-such-dir" / "data.bin"
