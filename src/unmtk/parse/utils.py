from struct import Struct
from typing import Any, Tuple

from ..errors import UnmtkFormatError, assert_ge

PADDING = b"\0 "


def read_struct(
    data: bytes, offset: int, struct: Struct, what: str
) -> Tuple[Tuple[Any, ...], int]:
    """Unpack ``struct`` at ``offset`` and return the values and the next offset.

    :raises UnmtkFormatError: If fewer than ``struct.size`` bytes remain.
    """
    remaining = len(data) - offset
    assert_ge(f"truncated {what}, bytes remaining", struct.size, remaining, offset)
    values = struct.unpack_from(data, offset)
    return values, offset + struct.size


def ascii_padded(buf: bytes, name: str, location: int) -> str:
    """Return a string from an ASCII-encoded buffer padded with nulls or spaces.

    Only trailing padding is removed; a null character remaining inside the
    string is not valid, since the value is used as a file name.

    :raises UnmtkFormatError: If the string is empty, contains a null
        character, or is not ASCII-encoded.
    """
    stripped = buf.rstrip(PADDING)
    if not stripped:
        raise UnmtkFormatError(f"{name}: {buf!r} is empty (at {location})")
    if b"\0" in stripped:
        raise UnmtkFormatError(
            f"{name}: {stripped!r} contains a null character (at {location})"
        )
    try:
        return stripped.decode("ascii")
    except UnicodeDecodeError as e:
        raise UnmtkFormatError(
            f"{name}: {stripped!r} is not ASCII, so it can't be used as a file name "
            f"(at {location})"
        ) from e
