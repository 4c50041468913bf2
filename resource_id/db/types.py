"""
Resource ID Column Type

Stores a `ResourceID` as its 30-character canonical text in a VARCHAR column.
Reads always go through `ResourceID.from_str`, so rows edited by hand surface
as `ColumnDecodeError` when fetched rather than when written.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy.engine import Dialect
from sqlalchemy.types import VARCHAR, TypeDecorator, TypeEngine

from resource_id.kernel.errors import ColumnDecodeError, ResourceIDError
from resource_id.kernel.ids import RESOURCE_ID_LENGTH, ResourceID

logger = structlog.get_logger()


class ResourceIDType(TypeDecorator):
    """VARCHAR(30) column holding a `ResourceID`."""

    impl = VARCHAR
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(length=RESOURCE_ID_LENGTH)

    @property
    def python_type(self) -> type:
        return ResourceID

    @staticmethod
    def compatible(sql_type: TypeEngine[Any]) -> bool:
        """True only for VARCHAR; TEXT, CHAR, NVARCHAR and generic String are rejected."""
        if isinstance(sql_type, ResourceIDType):
            return True
        return isinstance(sql_type, VARCHAR)

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, ResourceID):
            return str(value)
        if isinstance(value, str):
            return str(ResourceID.from_str(value))
        raise TypeError(f"Expected ResourceID or str, got {type(value)!r}")

    def process_result_value(self, value: Any, dialect: Dialect) -> ResourceID | None:
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning(
                "Failed to decode resource id column",
                value=value,
                error_code="db.non_string_value",
                dialect=dialect.name,
            )
            raise ColumnDecodeError(value=value)
        try:
            return ResourceID.from_str(value)
        except ResourceIDError as exc:
            logger.warning(
                "Failed to decode resource id column",
                value=value,
                error_code=exc.code,
                dialect=dialect.name,
            )
            raise ColumnDecodeError(value=value, reason=exc) from exc

