"""Lookup table from ``(domain, command)`` to output schema.

Kept apart from the schema modules so they can register themselves on import.
"""

from pydantic import BaseModel

SchemaKey = tuple[str, str]

_SCHEMAS: dict[SchemaKey, type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Bind ``schema_class`` to ``wormhole.api.<domain>.cmd_<command_name>``.

    A command has exactly one schema; registering twice is an error.
    """
    key: SchemaKey = (domain, command_name)
    existing = _SCHEMAS.get(key)
    if existing is not None:
        raise ValueError(f"{domain}.{command_name} already registered with {existing.__name__}")
    _SCHEMAS[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))
