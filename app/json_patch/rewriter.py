"""
Rewrites the generated JSON Patch schemas of an OpenAPI document.

Schema generators describe a generic patch document as the container class
it is in code: a list of generic operations plus a leaked reference to the
serializer's contract resolver. PatchSchemaRewriter replaces those entries
with schemas that describe the operations themselves:

    WidgetOperation      -> {op, path, from, value}, path/from limited to
                            the pointers of the Widget schema
    WidgetPatchDocument  -> {operations: [WidgetOperation]}

The rewrite is keyed on schema names only, so running it again over its own
output changes nothing.
"""

import logging
from typing import Any

from .builders import default_operation_properties, document_properties, operation_properties
from .naming import SchemaNaming, referenced_name
from .paths import schema_paths

logger = logging.getLogger(__name__)


def get_schema_registry(document: Any) -> dict[str, Any] | None:
    """Return `components.schemas` of an OpenAPI document, or None if absent."""
    if not isinstance(document, dict):
        return None
    components = document.get("components")
    if not isinstance(components, dict):
        return None
    schemas = components.get("schemas")
    if not isinstance(schemas, dict):
        return None
    return schemas


def _replace_properties(schema: dict[str, Any], properties: dict[str, Any]) -> None:
    schema["properties"] = properties

    # Drop required entries that named the generated properties
    if isinstance(schema.get("required"), list):
        schema["required"] = [name for name in schema["required"] if name in properties]
        if not schema["required"]:
            del schema["required"]


class PatchSchemaRewriter:
    """
    Three-pass rewrite of the JSON Patch entries in a schema registry.

    Passes run in order, since the patch-document pass links to the names
    the operation pass rebuilds:

    1. remove the leaked contract resolver schema
    2. rebuild every `*Operation` schema
    3. rebuild every `*PatchDocument` schema, and any schema that still
       references the contract resolver

    Operation paths are filled in last. A target model may itself point at
    an operation or patch-document schema, so its pointers are only final
    once every rebuilt entry has its final properties.
    """

    def __init__(self, naming: SchemaNaming | None = None):
        self.naming = naming or SchemaNaming()

    def apply(self, document: dict[str, Any]) -> None:
        schemas = get_schema_registry(document)
        if schemas is None:
            logger.debug("Document has no components.schemas, nothing to rewrite")
            return

        self.remove_contract_resolver(schemas)
        targets = self.fix_operation_schemas(schemas)
        self.fix_patch_document_schemas(schemas)
        self.limit_operation_paths(schemas, targets)

    def remove_contract_resolver(self, schemas: dict[str, Any]) -> None:
        if schemas.pop(self.naming.contract_resolver, None) is not None:
            logger.debug("Removed leaked schema %s", self.naming.contract_resolver)

    def fix_operation_schemas(self, schemas: dict[str, Any]) -> dict[str, str]:
        """
        Give every operation schema the free-form shape.

        Returns:
            Operation name -> target model name, for operations whose target
            model exists in the registry
        """
        # Operation kinds are inlined into each operation schema instead
        schemas.pop(self.naming.operation_type, None)

        targets: dict[str, str] = {}
        rebuilt = 0
        for name, schema in list(schemas.items()):
            if not self.naming.is_operation(name):
                continue
            if not isinstance(schema, dict):
                logger.debug("Skipping operation schema %s: not an object", name)
                continue

            _replace_properties(schema, default_operation_properties())
            base_name = self.naming.operation_base(name)
            if isinstance(schemas.get(base_name), dict):
                targets[name] = base_name
            else:
                logger.debug("Rebuilt %s with free-form paths, no %s schema", name, base_name)
            rebuilt += 1

        if rebuilt:
            logger.info("Rebuilt %d JSON Patch operation schemas", rebuilt)
        return targets

    def limit_operation_paths(self, schemas: dict[str, Any], targets: dict[str, str]) -> None:
        """Restrict `path` and `from` of each operation to its target's pointers."""
        for name, base_name in targets.items():
            paths = schema_paths(schemas[base_name], schemas)
            if not paths:
                # An empty enum allows no value at all; keep the free-form shape
                logger.debug("Kept free-form paths for %s, %s has no properties", name, base_name)
                continue
            _replace_properties(schemas[name], operation_properties(paths))
            logger.debug("Rebuilt %s with %d paths from %s", name, len(paths), base_name)

    def fix_patch_document_schemas(self, schemas: dict[str, Any]) -> None:
        rebuilt = 0
        for name, schema in list(schemas.items()):
            if not isinstance(schema, dict):
                continue
            if not (self.naming.is_document(name) or self._references_contract_resolver(schema)):
                continue

            operation_name = self.naming.operation_name(self.naming.document_base(name))
            _replace_properties(schema, document_properties(operation_name))
            logger.debug("Rebuilt %s as a list of %s", name, operation_name)
            rebuilt += 1

        if rebuilt:
            logger.info("Rebuilt %d JSON Patch document schemas", rebuilt)

    def _references_contract_resolver(self, schema: dict[str, Any]) -> bool:
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            return False
        return any(
            referenced_name(prop) == self.naming.contract_resolver for prop in properties.values()
        )


def rewrite_patch_schemas(document: dict[str, Any], naming: SchemaNaming | None = None) -> None:
    """Apply PatchSchemaRewriter to `document` in place."""
    PatchSchemaRewriter(naming).apply(document)
