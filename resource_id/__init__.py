"""Typed, prefixed, sortable resource identifiers.

Main exports:
- `ResourceID`: 4-character resource tag + ULID, 30 characters of text.
- `Ulid`: the immutable time-ordered suffix value.
- The typed error family raised while building or parsing either.
"""

from resource_id.kernel.errors import (
    ColumnDecodeError,
    DecodeError,
    InvalidLength,
    InvalidResourceType,
    KernelError,
    ResourceIDError,
    SchemaMismatchError,
    UnableToDecodeUlid,
)
from resource_id.kernel.ids import (
    RESOURCE_ID_LENGTH,
    RESOURCE_TAG_LENGTH,
    ResourceID,
    is_resource_id,
    new_resource_id,
)
from resource_id.kernel.ulid import ULID_TEXT_LENGTH, Ulid

__all__ = [
    "ColumnDecodeError",
    "DecodeError",
    "InvalidLength",
    "InvalidResourceType",
    "KernelError",
    "RESOURCE_ID_LENGTH",
    "RESOURCE_TAG_LENGTH",
    "ResourceID",
    "ResourceIDError",
    "SchemaMismatchError",
    "ULID_TEXT_LENGTH",
    "UnableToDecodeUlid",
    "Ulid",
    "is_resource_id",
    "new_resource_id",
]
