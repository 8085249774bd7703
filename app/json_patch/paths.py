"""
JSON pointer derivation for patch targets.

Walks a component schema and lists every pointer a patch operation may
address. Array elements are written as a positional placeholder `{n}`, where
`n` counts array nesting below the nearest object property.
"""

from typing import Any

from .naming import referenced_name

Schema = dict[str, Any]


def derive_paths(
    prefix: str,
    node: Any,
    schemas: dict[str, Schema],
    array_depth: int = 0,
    _expanding: tuple[str, ...] = (),
) -> list[str]:
    """
    List the pointer `prefix` and every pointer reachable below it.

    Args:
        prefix: Pointer of `node`, e.g. "/address"
        node: Schema node found at `prefix`
        schemas: Component registry used to resolve references
        array_depth: Number of enclosing arrays since the last property

    Returns:
        Pointers in depth-first order, `prefix` first
    """
    paths = [prefix]
    if not isinstance(node, dict):
        return paths

    ref_name = referenced_name(node)
    own_properties = node.get("properties")

    if ref_name is not None or own_properties:
        if own_properties:
            properties = own_properties
        elif ref_name in _expanding:
            # Cyclic model, stop here
            return paths
        else:
            properties = (schemas.get(ref_name) or {}).get("properties") or {}
            _expanding = _expanding + (ref_name,)

        for name, child in properties.items():
            paths.extend(derive_paths(f"{prefix}/{name}", child, schemas, _expanding=_expanding))

    elif isinstance(node.get("items"), dict):
        paths.extend(
            derive_paths(
                f"{prefix}/{{{array_depth}}}",
                node["items"],
                schemas,
                array_depth + 1,
                _expanding,
            )
        )

    return paths


def schema_paths(schema: Schema, schemas: dict[str, Schema]) -> list[str]:
    """Pointers for every top-level property of `schema`, in declaration order."""
    paths: list[str] = []
    for name, child in (schema.get("properties") or {}).items():
        paths.extend(derive_paths(f"/{name}", child, schemas))
    return paths
