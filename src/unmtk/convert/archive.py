from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel

from ..errors import Advisory
from ..parse.archive import Archive, ArchiveHeader, EntryRecord
from ..serde import Base64


class HeaderInfo(BaseModel):
    magic: str
    item_count: int
    unknown1: int
    file_size: int
    zero_field: int

    @classmethod
    def from_header(cls, header: ArchiveHeader) -> HeaderInfo:
        return cls(
            # magic is validated, so always ASCII
            magic=header.magic.decode("ascii"),
            item_count=header.item_count,
            unknown1=header.unknown1,
            file_size=header.file_size,
            zero_field=header.zero_field,
        )


class EntryInfo(BaseModel):
    name: str
    date_bytes: Optional[Base64] = None
    date_ascii: Optional[str] = None
    data_offset: int
    data_size: int
    entry_zero: int = 0

    @classmethod
    def from_entry(cls, entry: EntryRecord) -> EntryInfo:
        date_bytes: Optional[bytes] = None
        date_ascii: Optional[str] = None
        stripped = entry.date.rstrip(b"\0")
        try:
            date_ascii = stripped.decode("ascii")
        except UnicodeDecodeError:
            date_bytes = entry.date
        else:
            # e.g. a binary timestamp
            if not date_ascii.isprintable():
                date_ascii = None
                date_bytes = entry.date
        return cls(
            name=entry.name,
            date_bytes=Base64.from_optional(date_bytes),
            date_ascii=date_ascii,
            data_offset=entry.data_offset,
            data_size=entry.data_size,
            entry_zero=entry.entry_zero,
        )


class AdvisoryInfo(BaseModel):
    message: str
    location: Union[int, str]

    @classmethod
    def from_advisory(cls, advisory: Advisory) -> AdvisoryInfo:
        return cls(message=advisory.message, location=advisory.location)


class ArchiveReport(BaseModel):
    header: HeaderInfo
    entries: List[EntryInfo]
    advisories: List[AdvisoryInfo] = []

    @classmethod
    def from_archive(cls, archive: Archive) -> ArchiveReport:
        return cls(
            header=HeaderInfo.from_header(archive.header),
            entries=[EntryInfo.from_entry(entry) for entry in archive.entries],
            advisories=[AdvisoryInfo.from_advisory(a) for a in archive.advisories],
        )
