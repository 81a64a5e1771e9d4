from struct import Struct
from typing import Optional, Sequence, Tuple

HEADER = Struct("<4s 2H 2I")
ENTRY = Struct("<48s 16s 3I")

Item = Tuple[bytes, bytes]


def build_archive(  # pylint: disable=too-many-arguments
    items: Sequence[Item],
    magic: bytes = b"MTK-",
    unknown1: int = 1,
    file_size: Optional[int] = None,
    zero_field: int = 0,
    date: bytes = b"",
    entry_zero: int = 0,
) -> bytes:
    """Build an archive from (name, data) pairs, with the data following the table."""
    offset = HEADER.size + ENTRY.size * len(items)
    table = []
    for name, data in items:
        table.append(ENTRY.pack(name, date, offset, len(data), entry_zero))
        offset += len(data)

    total = offset
    if file_size is None:
        file_size = total
    header = HEADER.pack(magic, len(items), unknown1, file_size, zero_field)
    return header + b"".join(table) + b"".join(data for _, data in items)


def build_raw(
    entries: Sequence[Tuple[bytes, int, int]],
    payload: bytes,
    count: Optional[int] = None,
) -> bytes:
    """Build an archive from raw (name, offset, size) records."""
    size = HEADER.size + ENTRY.size * len(entries) + len(payload)
    if count is None:
        count = len(entries)
    header = HEADER.pack(b"MTK-", count, 1, size, 0)
    table = b"".join(
        ENTRY.pack(name, b"", offset, length, 0) for name, offset, length in entries
    )
    return header + table + payload
