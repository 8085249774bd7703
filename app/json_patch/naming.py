"""
Naming convention that pairs generated patch-document schemas with their
operation schemas.

The generator only leaves names behind, so matching is done on trailing
substrings: `WidgetPatchDocument` and `WidgetOperation` both belong to the
`Widget` schema. A model whose own name ends in one of the suffixes is
indistinguishable from a generated entry.
"""

from dataclasses import dataclass

from .conf import DEFAULTS, get_json_patch_settings

SCHEMA_REF_PREFIX = "#/components/schemas/"


@dataclass(frozen=True)
class SchemaNaming:
    operation_suffix: str = DEFAULTS["OPERATION_SUFFIX"]
    document_suffix: str = DEFAULTS["DOCUMENT_SUFFIX"]
    contract_resolver: str = DEFAULTS["CONTRACT_RESOLVER"]
    operation_type: str = DEFAULTS["OPERATION_TYPE"]

    @classmethod
    def from_settings(cls) -> "SchemaNaming":
        conf = get_json_patch_settings()
        return cls(
            operation_suffix=conf["OPERATION_SUFFIX"],
            document_suffix=conf["DOCUMENT_SUFFIX"],
            contract_resolver=conf["CONTRACT_RESOLVER"],
            operation_type=conf["OPERATION_TYPE"],
        )

    def is_operation(self, name: str) -> bool:
        return name.endswith(self.operation_suffix)

    def is_document(self, name: str) -> bool:
        return name.endswith(self.document_suffix)

    def operation_base(self, name: str) -> str:
        return name.removesuffix(self.operation_suffix)

    def document_base(self, name: str) -> str:
        return name.removesuffix(self.document_suffix)

    def operation_name(self, base: str) -> str:
        return base + self.operation_suffix


def schema_ref(name: str) -> str:
    """Build a local component reference, e.g. `#/components/schemas/Widget`."""
    return SCHEMA_REF_PREFIX + name


def referenced_name(node) -> str | None:
    """
    Return the component name a schema node points at, or None.

    Handles plain `$ref` nodes and the single-member `allOf` wrapper
    drf-spectacular emits for nullable or read-only references.
    """
    if not isinstance(node, dict):
        return None

    ref = node.get("$ref")
    if ref is None:
        all_of = node.get("allOf")
        if isinstance(all_of, list) and len(all_of) == 1 and isinstance(all_of[0], dict):
            ref = all_of[0].get("$ref")

    if not isinstance(ref, str):
        return None
    return ref.rsplit("/", 1)[-1]
