from typing import Dict

from .parse.archive import read_archive


def extract_archive(data: bytes) -> Dict[str, memoryview]:
    """Return the data of each entry in an MTK archive, keyed by entry name."""
    return read_archive(data).files
