"""binrec on-disk record layout.

Single source of truth for the record file format. Writer and Reader must
remain synchronized with this file.

A data file is a flat run of fixed-size records: no header, no length
prefix, no checksum, no version.

Record (36 bytes, little-endian):
  [00-24] name   UTF-8, NUL padded (25 bytes)
  [25-27] pad    zero bytes (3)
  [28-31] id     int32
  [32-35] score  float32

The pad keeps the layout identical to a C `{char[25]; int; float}` struct
under default alignment, so files written by such programs on little-endian
hosts read back unchanged.
"""

import struct

NAME_CAPACITY = 25

RECORD_FMT = "<25s3xif"
RECORD_STRUCT = struct.Struct(RECORD_FMT)
RECORD_SIZE = RECORD_STRUCT.size  # 36

ID_MIN = -(2**31)
ID_MAX = 2**31 - 1

NAME_ENCODING = "utf-8"
