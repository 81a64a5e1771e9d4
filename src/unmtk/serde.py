from __future__ import annotations

from base64 import b64decode, b64encode
from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class Base64(bytes):
    """Bytes, serialized to JSON as a base64-encoded string."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_str, when_used="json"
            ),
        )

    @classmethod
    def validate(cls, value: Union[str, bytes]) -> bytes:
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            return b64decode(value)
        raise ValueError("bytes or string required")  # pragma: no cover

    @staticmethod
    def to_str(value: bytes) -> str:
        return b64encode(value).decode("ascii")

    @classmethod
    def from_optional(cls, value: Optional[bytes]) -> Optional[Base64]:
        if value is None:
            return None

        return Base64(value)
