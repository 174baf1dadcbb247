"""
Storage package for binrec.

Centralizes file I/O for record files: the byte codec, the bulk writer and
the bulk reader. Keep this layer focused on I/O, decoupled from update rules
and reporting.
"""

from binrec.storage.codec import decode_record, encode_record, encode_records, iter_decode
from binrec.storage.reader import allocate_buffer, count_records, read_records_into
from binrec.storage.writer import write_records

__all__ = [
    "allocate_buffer",
    "count_records",
    "decode_record",
    "encode_record",
    "encode_records",
    "iter_decode",
    "read_records_into",
    "write_records",
]
