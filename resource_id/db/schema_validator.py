"""
Resource ID Schema Validator

Checks that every column mapped to `ResourceIDType` is backed by a compatible
database column, so a TEXT or CHAR column created by hand is caught at startup
instead of on the first read.
"""

from collections.abc import Iterable

import structlog
from sqlalchemy import Connection, Table, inspect

from resource_id.db.types import ResourceIDType
from resource_id.kernel.errors import SchemaMismatchError

logger = structlog.get_logger()


def validate_resource_id_columns(
    connection: Connection, tables: Iterable[Table]
) -> tuple[bool, list[str]]:
    """
    Compare mapped resource id columns against the live schema.

    Args:
        connection: Open SQLAlchemy connection
        tables: Mapped tables to check

    Returns:
        Tuple of (is_valid, problems)
    """
    inspector = inspect(connection)
    problems: list[str] = []
    checked = 0

    for table in tables:
        expected = [c.name for c in table.columns if isinstance(c.type, ResourceIDType)]
        if not expected:
            continue

        if not inspector.has_table(table.name, schema=table.schema):
            problems.append(f"table:{table.name}")
            continue

        reflected = {
            col["name"]: col["type"]
            for col in inspector.get_columns(table.name, schema=table.schema)
        }
        for name in expected:
            checked += 1
            db_type = reflected.get(name)
            if db_type is None:
                problems.append(f"column:{table.name}.{name}")
            elif not ResourceIDType.compatible(db_type):
                problems.append(f"type:{table.name}.{name}={db_type}")

    is_valid = len(problems) == 0

    if not is_valid:
        logger.error(
            "Resource id schema validation failed",
            problem_count=len(problems),
            problems=problems[:10],
        )
    else:
        logger.info("Resource id schema validation passed", column_count=checked)

    return is_valid, problems


def ensure_resource_id_columns_or_fail(
    connection: Connection, tables: Iterable[Table]
) -> None:
    """
    Validate resource id columns and raise if any are missing or mistyped.

    Raises:
        SchemaMismatchError: If validation fails
    """
    is_valid, problems = validate_resource_id_columns(connection, tables)

    if not is_valid:
        summary = ", ".join(problems[:5])
        if len(problems) > 5:
            summary += f"... and {len(problems) - 5} more"

        raise SchemaMismatchError(
            message=f"Resource id columns do not match the database schema: {summary}",
            problems=problems,
        )
