"""
Domain package for binrec.

Exports the record model shared by the storage layer, the update rules and
the CLI. Keep this package focused on data definitions and validation.
"""

from binrec.domain.models import SAMPLE_RECORDS, Record, check_score, to_float32

__all__ = [
    "Record",
    "SAMPLE_RECORDS",
    "check_score",
    "to_float32",
]
