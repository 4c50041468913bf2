"""SQLAlchemy adapters for resource identifiers."""

from resource_id.db.types import ResourceIDType

__all__ = ["ResourceIDType"]
