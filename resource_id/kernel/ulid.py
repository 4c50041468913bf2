"""Immutable wrapper around the `python-ulid` primitive.

A ULID is 128 bits: a 48-bit millisecond timestamp followed by 80 random bits,
written as 26 Crockford base-32 characters. The text form sorts the same way
as the raw value.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from ulid import ULID

from resource_id.kernel._pydantic import string_value_schema
from resource_id.kernel.errors import DecodeError
from resource_id.kernel.time import from_unix_millis

ULID_TEXT_LENGTH = 26

_ENCODING = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_DECODABLE = frozenset(_ENCODING + _ENCODING.lower())
# Anything above "7" in the first position overflows 128 bits.
_MAX_LEADING_CHAR = "7"


def _check_text(text: str) -> None:
    if len(text) != ULID_TEXT_LENGTH:
        raise DecodeError(DecodeError.INVALID_LENGTH, value=text)
    if any(ch not in _DECODABLE for ch in text):
        raise DecodeError(DecodeError.INVALID_CHAR, value=text)
    if text[0] > _MAX_LEADING_CHAR:
        raise DecodeError(DecodeError.INVALID_CHAR, value=text)


@functools.total_ordering
@dataclass(frozen=True, repr=False)
class Ulid:
    """A time-ordered unique value. `Ulid()` captures the clock and fresh entropy."""

    _value: ULID = field(default_factory=ULID)

    def __post_init__(self) -> None:
        if not isinstance(self._value, ULID):
            raise TypeError(
                f"Ulid wraps ulid.ULID, got {type(self._value).__name__}; use Ulid.from_str for text"
            )

    @classmethod
    def new(cls) -> Ulid:
        return cls()

    @classmethod
    def from_str(cls, text: str) -> Ulid:
        """Decode canonical text (either case).

        Raises:
            DecodeError: wrong length, a character outside the alphabet, or a
                value that does not fit in 128 bits.
        """
        _check_text(text)
        try:
            value = ULID.from_str(text.upper())
        except ValueError as exc:
            raise DecodeError(DecodeError.INVALID_CHAR, value=text) from exc
        return cls(value)

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds since the Unix epoch encoded in the high 48 bits."""
        return int(self._value) >> 80

    @property
    def datetime(self) -> datetime:
        return from_unix_millis(self.timestamp_ms)

    def __str__(self) -> str:
        return str(self._value).upper()

    def __repr__(self) -> str:
        return f"Ulid({str(self)!r})"

    def __int__(self) -> int:
        return int(self._value)

    def __bytes__(self) -> bytes:
        return bytes(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return bytes(self) < bytes(other)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return string_value_schema(cls, cls.from_str)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "ulid"}
