"""Pydantic hooks shared by the kernel's string-backed value types."""

from __future__ import annotations

from typing import Any, Callable

from pydantic_core import core_schema


def string_value_schema(cls: type, parse: Callable[[str], Any]) -> core_schema.CoreSchema:
    """Core schema for a value type whose wire form is a bare string.

    Python input accepts an existing instance or a string; JSON input accepts
    only a string. Serialization in JSON mode emits `str(value)`.
    """

    def coerce(value: Any) -> Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return parse(value)
        raise ValueError(f"Expected {cls.__name__} or str, got {type(value).__name__}")

    return core_schema.json_or_python_schema(
        json_schema=core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(parse),
            ]
        ),
        python_schema=core_schema.no_info_plain_validator_function(coerce),
        serialization=core_schema.to_string_ser_schema(),
    )
