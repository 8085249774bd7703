"""
Schema fragments for JSON Patch operations and patch documents.
"""

from typing import Any, Sequence

from .naming import schema_ref

# "invalid" is the patch library's fallback operation type, not a JSON Patch op.
OPERATION_NAMES = ("add", "copy", "move", "remove", "replace", "test", "invalid")

PATH_EXAMPLE = "/path/to/property"
VALUE_EXAMPLE = "new value"
OPERATIONS_DESCRIPTION = "Array of operations to perform."


def _op_property() -> dict[str, Any]:
    return {"type": "string", "enum": list(OPERATION_NAMES)}


def _value_property() -> dict[str, Any]:
    return {"type": "string", "example": VALUE_EXAMPLE}


def operation_properties(paths: Sequence[str]) -> dict[str, dict[str, Any]]:
    """Operation properties with `path` and `from` limited to the given pointers."""
    return {
        "op": _op_property(),
        "path": {"type": "string", "enum": list(paths)},
        "from": {"type": "string", "enum": list(paths)},
        "value": _value_property(),
    }


def default_operation_properties() -> dict[str, dict[str, Any]]:
    """Operation properties for targets without a known schema."""
    return {
        "op": _op_property(),
        "path": {"type": "string", "example": PATH_EXAMPLE},
        "from": {"type": "string", "example": PATH_EXAMPLE},
        "value": _value_property(),
    }


def document_properties(operation_name: str) -> dict[str, dict[str, Any]]:
    return {
        "operations": {
            "type": "array",
            "description": OPERATIONS_DESCRIPTION,
            "items": {"$ref": schema_ref(operation_name)},
        }
    }
