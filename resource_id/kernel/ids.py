"""Typed, prefixed, sortable resource identifiers.

Format: `{RESOURCE}{ULID}`, a 4-character uppercase resource tag followed by a
26-character ULID, 30 characters in total, e.g. `USER01ARZ3NDEKTSV4RRFFQ69G5FAV`.

Tags are validated structurally only (exactly 4 ASCII characters). Callers that
want a closed set of tags keep their own `str` enum and pass its members in.
"""

from __future__ import annotations

import functools
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from resource_id.kernel._pydantic import string_value_schema
from resource_id.kernel.errors import (
    DecodeError,
    InvalidLength,
    InvalidResourceType,
    UnableToDecodeUlid,
)
from resource_id.kernel.ulid import ULID_TEXT_LENGTH, Ulid

RESOURCE_TAG_LENGTH = 4
RESOURCE_ID_LENGTH = RESOURCE_TAG_LENGTH + ULID_TEXT_LENGTH

_JSON_SCHEMA: dict[str, Any] = {
    "type": "string",
    "format": "ResourceID",
    "title": "ResourceID",
    "description": "A unique resource identifier",
}


def _validate_resource(value: str) -> None:
    if len(value) != RESOURCE_TAG_LENGTH or not value.isascii():
        raise InvalidResourceType(value)


def _resource_text(resource: Any) -> str:
    # str() on a (str, Enum) member yields "Cls.MEMBER", not the tag.
    if isinstance(resource, Enum):
        resource = resource.value
    return str(resource)


@functools.total_ordering
class ResourceID:
    """A resource tag plus a ULID.

    Equality, hashing and ordering are structural over `(resource, ulid)`, which
    matches plain string comparison of the canonical text.
    """

    __slots__ = ("_resource", "_ulid")

    def __init__(self, resource: Any) -> None:
        ulid = Ulid.new()
        value = _resource_text(resource)
        _validate_resource(value)
        self._set(value.upper(), ulid)

    def _set(self, resource: str, ulid: Ulid) -> None:
        object.__setattr__(self, "_resource", resource)
        object.__setattr__(self, "_ulid", ulid)

    @classmethod
    def new(cls, resource: Any) -> ResourceID:
        return cls(resource)

    @classmethod
    def from_str(cls, text: str) -> ResourceID:
        """Parse a 30-character identifier.

        Raises:
            InvalidLength: `text` is not exactly 30 characters.
            InvalidResourceType: the first 4 characters are not a valid tag.
            UnableToDecodeUlid: the last 26 characters are not a ULID.
        """
        if len(text) != RESOURCE_ID_LENGTH:
            raise InvalidLength(text)

        resource = text[:RESOURCE_TAG_LENGTH]
        _validate_resource(resource)

        try:
            ulid = Ulid.from_str(text[RESOURCE_TAG_LENGTH:])
        except DecodeError as exc:
            raise UnableToDecodeUlid(exc) from exc

        instance = cls.__new__(cls)
        instance._set(resource.upper(), ulid)
        return instance

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def ulid(self) -> Ulid:
        return self._ulid

    @property
    def created_at(self) -> datetime:
        """When the ULID was minted (millisecond precision, UTC)."""
        return self._ulid.datetime

    @staticmethod
    def json_schema() -> dict[str, Any]:
        return dict(_JSON_SCHEMA)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return f"{self._resource}{self._ulid}"

    def __repr__(self) -> str:
        return f"ResourceID({str(self)!r})"

    def _key(self) -> tuple[str, Ulid]:
        return (self._resource, self._ulid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceID):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResourceID):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_str, (str(self),))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return string_value_schema(cls, cls.from_str)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls.json_schema()


def new_resource_id(resource: Any) -> str:
    """Mint an identifier and return its canonical text."""
    return str(ResourceID(resource))


def is_resource_id(value: str, resource: Any | None = None) -> bool:
    """Return True if `value` parses, optionally also requiring a given tag."""
    try:
        parsed = ResourceID.from_str(value)
    except ValueError:
        return False
    if resource is None:
        return True
    return parsed.resource == _resource_text(resource).upper()
