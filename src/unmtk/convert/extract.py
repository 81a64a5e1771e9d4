"""Extract the entries of an MTK archive into a directory.

Each entry is written to a file named after the entry. Existing files are
overwritten. If several entries share a name, the last one is written.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..errors import UnmtkExtractError
from ..parse.archive import Archive, read_archive
from .archive import ArchiveReport

LOG = logging.getLogger(__name__)

SEPARATORS = ("/", "\\")


def output_file(output_dir: Path, name: str) -> Path:
    """Return the path an entry is written to.

    :raises UnmtkExtractError: If the name would not be a file directly
        inside the output directory.
    """
    if name in (".", "..") or any(sep in name for sep in SEPARATORS):
        raise UnmtkExtractError(f"entry name: {name!r} is not a plain file name")
    return output_dir / name


def extract_to_directory(archive: Archive, output_dir: Path) -> List[Path]:
    paths = [
        (output_file(output_dir, name), data) for name, data in archive.files.items()
    ]

    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for path, data in paths:
        LOG.debug("Writing '%s' (%d bytes)", path.name, len(data))
        path.write_bytes(data)
        written.append(path)
    return written


def read_input(input_path: Optional[Path]) -> bytes:
    if input_path is None:
        LOG.debug("Reading archive from standard input")
        return sys.stdin.buffer.read()
    return input_path.read_bytes()


def mtk_to_directory(
    input_path: Optional[Path], output_dir: Path, verbose: bool = False
) -> List[Path]:
    data = read_input(input_path)
    archive = read_archive(data)
    if verbose:
        report = ArchiveReport.from_archive(archive)
        sys.stdout.write(report.model_dump_json(exclude_none=True, indent=2) + "\n")
    return extract_to_directory(archive, output_dir)
