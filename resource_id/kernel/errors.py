from __future__ import annotations

import re
from typing import Any


_ERROR_CODE_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")


class KernelError(Exception):
    """Base typed error for resource-id.

    Goals:
    - Stable `code` for programmatic handling across callers.
    - Human-readable `message` matching the canonical error text.
    - Optional `meta` payload for debugging (safe-to-expose only).
    """

    def __init__(
        self,
        *,
        code: str,
        message: str,
        meta: dict[str, Any] | None = None,
    ) -> None:
        if not _ERROR_CODE_RE.fullmatch(code):
            raise ValueError(
                "Invalid error code. Expected dot-separated lowercase tokens, "
                f"got: {code!r}"
            )
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = dict(meta or {})

    def to_public_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if self.meta:
            payload["meta"] = self.meta
        return payload


class DecodeError(KernelError, ValueError):
    """A 26-character ULID text could not be decoded."""

    INVALID_LENGTH = "invalid_length"
    INVALID_CHAR = "invalid_char"

    _MESSAGES = {
        INVALID_LENGTH: "invalid length",
        INVALID_CHAR: "invalid character",
    }

    def __init__(self, kind: str, *, value: str | None = None):
        if kind not in self._MESSAGES:
            raise ValueError(f"Unknown ULID decode error kind: {kind!r}")
        meta = {"value": value} if value is not None else None
        super().__init__(code=f"ulid.{kind}", message=self._MESSAGES[kind], meta=meta)
        self.kind = kind


class ResourceIDError(KernelError, ValueError):
    """Base for every failure to build or parse a `ResourceID`."""


class InvalidResourceType(ResourceIDError):
    def __init__(self, value: str):
        super().__init__(
            code="resource_id.invalid_resource_type",
            message=f"Invalid resource type: {value}",
            meta={"value": value},
        )
        self.value = value


class InvalidLength(ResourceIDError):
    def __init__(self, value: str):
        super().__init__(
            code="resource_id.invalid_length",
            message=f"Invalid ID length: {value} (expected 30)",
            meta={"value": value, "length": len(value)},
        )
        self.value = value


class UnableToDecodeUlid(ResourceIDError):
    def __init__(self, inner: DecodeError):
        super().__init__(
            code="resource_id.undecodable_ulid",
            message=f"Unable to decode internal Ulid: {inner}",
            meta={"reason": inner.code},
        )
        self.inner = inner


class ColumnDecodeError(KernelError):
    """A stored column value is not a valid resource identifier."""

    def __init__(self, *, value: Any, reason: KernelError | None = None):
        detail = str(reason) if reason is not None else f"expected str, got {type(value).__name__}"
        super().__init__(
            code="db.column_decode_error",
            message=f"Unable to decode resource id column value {value!r}: {detail}",
            meta={"reason": reason.code if reason is not None else "db.non_string_value"},
        )
        self.value = value
        self.reason = reason


class SchemaMismatchError(KernelError):
    def __init__(
        self,
        *,
        message: str = "Resource id columns do not match the database schema",
        problems: list[str] | None = None,
    ):
        super().__init__(
            code="db.schema_mismatch",
            message=message,
            meta={"problems": list(problems or [])},
        )
        self.problems = list(problems or [])
