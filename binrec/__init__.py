"""
binrec - Fixed-size binary record files.

This package persists a sequence of fixed-layout records (name, id, score) to
a flat binary file and reads them back:

- A documented, platform-independent 36-byte record layout
- A bulk writer that replaces the file contents
- A bulk reader that decodes into a caller-owned buffer
- Update rules applied in memory to the records read (never written back)

Errors opening the data file are logged and reported, never raised.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from binrec.config import Settings, get_settings
from binrec.domain.models import SAMPLE_RECORDS, Record
from binrec.layout import NAME_CAPACITY, RECORD_FMT, RECORD_SIZE
from binrec.rules import AbstractUpdateRule, ScoreOverrideRule, UpdateRule
from binrec.scanner import ScanResult, apply_rule, read_and_scan
from binrec.storage import allocate_buffer, read_records_into, write_records
from binrec.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records and layout
    "Record",
    "SAMPLE_RECORDS",
    "NAME_CAPACITY",
    "RECORD_FMT",
    "RECORD_SIZE",
    # Storage
    "allocate_buffer",
    "read_records_into",
    "write_records",
    # Rules and scanning
    "UpdateRule",
    "AbstractUpdateRule",
    "ScoreOverrideRule",
    "ScanResult",
    "apply_rule",
    "read_and_scan",
    # Logging
    "configure_logging",
    "get_logger",
]
