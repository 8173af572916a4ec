"""Check command output documents against their registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema

_API_PACKAGE = "wormhole.api."


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` as produced by the command ``func``.

    The schema is found from where the command lives: ``cmd_<name>`` in
    ``wormhole.api.<domain>...``. Anything else, or a command with no schema,
    passes through untouched. A validated document comes back re-dumped, so
    schema defaults are filled in.

    Raises:
        ValueError: If the output does not match the schema
    """
    module, name = func.__module__, func.__name__
    if not module.startswith(_API_PACKAGE) or not name.startswith("cmd_"):
        return output

    domain = module[len(_API_PACKAGE) :].partition(".")[0]
    command = name.removeprefix("cmd_")
    schema_class = get_output_schema(domain, command)
    if schema_class is None:
        return output

    try:
        return schema_class.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command}: {e}") from e
