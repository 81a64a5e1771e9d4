"""Read MTK archives.

An MTK archive is a 16 byte header, followed by a table of 76 byte entries,
followed by the data of each entry. All integers are little-endian. Each entry
points to its data via an absolute offset and a size. Several header and entry
fields have a known value, but the data can be extracted even if they differ,
so mismatches are collected as advisories instead of raising.

Entry names are not guaranteed to be unique. The mapping of names to data
keeps the data of the last entry with a given name, but every entry is kept
in the table.
"""
import logging
from dataclasses import dataclass, field
from struct import Struct
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import (
    Advisory,
    assert_eq,
    assert_ge,
    assert_le,
    check_eq,
    check_unique,
)
from .utils import ascii_padded, read_struct

MAGIC = b"MTK-"
UNKNOWN1 = 1

HEADER = Struct("<4s 2H 2I")
assert HEADER.size == 16, HEADER.size
ENTRY = Struct("<48s 16s 3I")
assert ENTRY.size == 76, ENTRY.size

LOG = logging.getLogger(__name__)

Advisories = Tuple[Advisory, ...]


@dataclass(frozen=True)
class ArchiveHeader:
    magic: bytes
    item_count: int
    unknown1: int
    file_size: int
    zero_field: int


@dataclass(frozen=True)
class EntryRecord:
    name: str
    date: bytes
    data_offset: int
    data_size: int
    entry_zero: int
    index: int = 0
    location: int = 0

    @property
    def data_end(self) -> int:
        return self.data_offset + self.data_size


@dataclass(frozen=True)
class Archive:
    header: ArchiveHeader
    entries: Tuple[EntryRecord, ...]
    files: Dict[str, memoryview] = field(repr=False)
    advisories: Advisories = ()


def _collect(*results: Optional[Advisory]) -> Advisories:
    return tuple(advisory for advisory in results if advisory is not None)


def read_header(data: bytes) -> Tuple[ArchiveHeader, int, Advisories]:
    (magic, item_count, unknown1, file_size, zero_field), offset = read_struct(
        data, 0, HEADER, "header"
    )
    LOG.debug(
        "Archive magic %r, count %d, unknown %d, size %d, zero %d",
        magic,
        item_count,
        unknown1,
        file_size,
        zero_field,
    )
    assert_eq("bad magic", MAGIC, magic, 0)
    advisories = _collect(
        check_eq("header unknown", UNKNOWN1, unknown1, 6),
        check_eq("header file size", len(data), file_size, 8),
        check_eq("header zero", 0, zero_field, 12),
    )
    header = ArchiveHeader(magic, item_count, unknown1, file_size, zero_field)
    return header, offset, advisories


def validate_entry(entry: EntryRecord, length: int) -> None:
    """Ensure the entry's data lies within a buffer of ``length`` bytes.

    :raises UnmtkFormatError: If the entry is out of range.
    """
    assert_le(
        f"entry out of range, '{entry.name}' data end",
        length,
        entry.data_end,
        entry.location,
    )


def read_entry(
    data: bytes, offset: int, index: int
) -> Tuple[EntryRecord, int, Advisories]:
    LOG.debug("Reading entry %d at %d", index, offset)
    (raw_name, date, data_offset, data_size, entry_zero), next_offset = read_struct(
        data, offset, ENTRY, "entry table"
    )
    name = ascii_padded(raw_name, f"entry {index} name", offset)
    LOG.debug(
        "Entry '%s', data from %d to %d", name, data_offset, data_offset + data_size
    )
    entry = EntryRecord(
        name, date, data_offset, data_size, entry_zero, index=index, location=offset
    )
    advisories = _collect(check_eq(f"entry '{name}' zero", 0, entry_zero, offset + 72))
    return entry, next_offset, advisories


def read_entries(
    data: bytes, offset: int, count: int
) -> Tuple[Tuple[EntryRecord, ...], int, Advisories]:
    remaining = len(data) - offset
    assert_ge(
        "truncated entry table, bytes remaining", count * ENTRY.size, remaining, offset
    )
    entries: List[EntryRecord] = []
    advisories: Advisories = ()
    for i in range(count):
        entry, offset, found = read_entry(data, offset, i)
        entries.append(entry)
        advisories += found
    return tuple(entries), offset, advisories


def extract_payload(data: bytes, entry: EntryRecord) -> memoryview:
    """Return the entry's data as a view into ``data``, without copying."""
    validate_entry(entry, len(data))
    return memoryview(data)[entry.data_offset : entry.data_end]


def build_files(
    data: bytes, entries: Sequence[EntryRecord]
) -> Tuple[Dict[str, memoryview], Advisories]:
    files: Dict[str, memoryview] = {}
    seen: Dict[str, int] = {}
    duplicates: List[Optional[Advisory]] = []
    for entry in entries:
        duplicates.append(
            check_unique(f"entry {entry.index} name", seen, entry.name, entry.location)
        )
        seen[entry.name] = entry.index
        # last one wins
        files[entry.name] = extract_payload(data, entry)
    return files, _collect(*duplicates)


def read_archive(data: bytes) -> Archive:
    """Parse an MTK archive held in memory.

    All entries are validated before any payload is sliced, so a damaged
    archive never yields partial results.

    :raises UnmtkFormatError: If the magic is wrong, the header or entry table
        is truncated, an entry name is unusable, or an entry's data lies
        outside the buffer.
    """
    LOG.debug("Reading archive data...")
    header, offset, advisories = read_header(data)
    entries, offset, found = read_entries(data, offset, header.item_count)
    advisories += found
    LOG.debug("Read %d entries, table end at %d", len(entries), offset)

    for entry in entries:
        validate_entry(entry, len(data))

    files, found = build_files(data, entries)
    advisories += found
    LOG.debug("Read archive data")
    return Archive(header, entries, files, advisories)
