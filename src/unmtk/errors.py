import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

from typing_extensions import Protocol

T = TypeVar("T", bound="Comparable")

LOG = logging.getLogger(__name__)


class Comparable(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __le__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __gt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __ge__(self: T, other: T) -> bool:
        pass  # pragma: no cover


class UnmtkError(Exception):
    """Base error for all errors in the library."""


class UnmtkParseError(UnmtkError):
    """An error when parsing data."""


class UnmtkFormatError(UnmtkParseError):
    """The data is not a valid MTK archive, or is damaged beyond extraction."""


class UnmtkExtractError(UnmtkError):
    """An error when writing extracted entries."""


FormatError = UnmtkFormatError


@dataclass(frozen=True)
class Advisory:
    """A field did not have its documented value, but extraction can continue."""

    name: str
    expected: Any
    actual: Any
    location: Union[int, str]
    operator: str = "=="

    @property
    def message(self) -> str:
        return (
            f"{self.name}: {self.actual!r} {self.operator} {self.expected!r} "
            f"(at {self.location})"
        )

    def __str__(self) -> str:
        return self.message


def _assert_base(  # pylint: disable=too-many-arguments
    result: bool,
    operator: str,
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[UnmtkError] = UnmtkFormatError,
) -> None:
    if not result:
        raise error_class(f"{name}: {actual!r} {operator} {expected!r} (at {location})")


def assert_eq(
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[UnmtkError] = UnmtkFormatError,
) -> None:
    result = actual == expected
    _assert_base(result, "==", name, expected, actual, location, error_class)


def assert_le(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[UnmtkError] = UnmtkFormatError,
) -> None:
    result = actual <= expected
    _assert_base(result, "<=", name, expected, actual, location, error_class)


def assert_ge(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[UnmtkError] = UnmtkFormatError,
) -> None:
    result = actual >= expected
    _assert_base(result, ">=", name, expected, actual, location, error_class)


def check_eq(
    name: str, expected: Any, actual: Any, location: Union[int, str]
) -> Optional[Advisory]:
    """Like :func:`assert_eq`, but a mismatch is only logged and returned."""
    if actual == expected:
        return None
    advisory = Advisory(name, expected, actual, location)
    LOG.warning("%s", advisory)
    return advisory


def check_unique(
    name: str, seen: Dict[str, int], actual: str, location: Union[int, str]
) -> Optional[Advisory]:
    """Check ``actual`` has not been seen yet; ``seen`` maps values to indices."""
    if actual not in seen:
        return None
    advisory = Advisory(name, seen[actual], actual, location, "already in entry")
    LOG.warning("%s", advisory)
    return advisory
