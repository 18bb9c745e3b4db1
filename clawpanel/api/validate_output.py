"""Validate command output dicts against their registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against registered schema.

    Args:
        func: The command function (used to infer domain and command name)
        output: The output dict to validate

    Returns:
        Validated output dict (with defaults filled in)

    Raises:
        ValueError: If validation fails
    """
    # Infer domain and command from function, e.g. clawpanel.api.service.cmd_start
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[0] != "clawpanel" or module_parts[1] != "api":
        return output

    domain = module_parts[2]
    func_name = func.__name__
    if not func_name.startswith("cmd_"):
        return output

    command_name = func_name[4:]

    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        validated = schema_class(**output)
        return validated.model_dump(mode="python")
    except Exception as e:
        raise ValueError(
            f"Output validation failed for {domain}.{command_name}: {e}\n"
            f"Expected schema: {schema_class.model_json_schema()}\n"
            f"Got output: {output}"
        ) from e
