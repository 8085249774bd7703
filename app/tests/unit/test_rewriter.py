"""
Unit tests for PatchSchemaRewriter.

Documents come from tests.documents, shaped like the components a generator
emits for JsonPatchDocument<Widget> and an untyped patch document.
"""

import copy

import pytest

from json_patch.builders import (
    OPERATION_NAMES,
    default_operation_properties,
    document_properties,
    operation_properties,
)
from json_patch.naming import SchemaNaming
from json_patch.rewriter import PatchSchemaRewriter, get_schema_registry, rewrite_patch_schemas
from tests.documents import GENERATED_SCHEMAS, WIDGET_PATHS, ref


@pytest.fixture
def rewriter():
    return PatchSchemaRewriter()


@pytest.mark.unit
class TestContractResolverRemoval:
    def test_contract_resolver_is_removed(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        assert "IContractResolver" not in schemas

    def test_missing_contract_resolver_is_fine(self, rewriter, openapi_document, schemas):
        del schemas["IContractResolver"]

        rewriter.apply(openapi_document)

        assert "IContractResolver" not in schemas

    def test_operation_type_enum_is_removed(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        assert "OperationType" not in schemas


@pytest.mark.unit
class TestOperationSchemas:
    def test_typed_operation_lists_target_paths(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        operation = schemas["WidgetOperation"]
        assert list(operation["properties"]) == ["op", "path", "from", "value"]
        assert operation["properties"] == operation_properties(WIDGET_PATHS)
        assert operation["properties"]["op"]["enum"] == list(OPERATION_NAMES)

    def test_untyped_operation_gets_free_form_paths(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        operation = schemas["DynamicOperation"]
        assert operation["properties"] == default_operation_properties()
        assert "enum" not in operation["properties"]["path"]
        assert operation["properties"]["from"]["example"] == "/path/to/property"

    def test_target_without_properties_keeps_free_form_paths(self, rewriter, openapi_document, schemas):
        schemas["Empty"] = {"type": "object"}
        schemas["EmptyOperation"] = {"type": "object", "properties": {}}

        rewriter.apply(openapi_document)

        assert schemas["EmptyOperation"]["properties"] == default_operation_properties()

    def test_other_keys_survive_and_required_is_trimmed(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        operation = schemas["WidgetOperation"]
        assert operation["type"] == "object"
        assert operation["additionalProperties"] is False
        assert operation["required"] == ["op"]

    def test_non_dict_operation_entry_is_skipped(self, rewriter, openapi_document, schemas):
        schemas["BrokenOperation"] = True

        rewriter.apply(openapi_document)

        assert schemas["BrokenOperation"] is True


@pytest.mark.unit
class TestPatchDocumentSchemas:
    def test_document_becomes_operation_list(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        document = schemas["WidgetPatchDocument"]
        assert document["properties"] == document_properties("WidgetOperation")
        assert document["required"] == ["operations"]
        assert document["additionalProperties"] is False

    def test_untyped_document_links_untyped_operation(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        items = schemas["DynamicPatchDocument"]["properties"]["operations"]["items"]
        assert items == ref("DynamicOperation")

    def test_schema_referencing_contract_resolver_keeps_full_name(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        container = schemas["LegacyPatchContainer"]
        assert list(container["properties"]) == ["operations"]
        assert container["properties"]["operations"]["items"] == ref("LegacyPatchContainerOperation")

    def test_document_without_properties_is_rebuilt(self, rewriter, openapi_document, schemas):
        schemas["InvoicePatchDocument"] = {"type": "object"}

        rewriter.apply(openapi_document)

        assert schemas["InvoicePatchDocument"]["properties"] == document_properties("InvoiceOperation")


@pytest.mark.unit
class TestRewriterContract:
    def test_unrelated_schemas_are_untouched(self, rewriter, openapi_document, schemas):
        rewriter.apply(openapi_document)

        for name in ("Address", "Tag", "Widget", "Invoice"):
            assert schemas[name] == GENERATED_SCHEMAS[name]

    def test_rest_of_document_is_untouched(self, rewriter, openapi_document):
        rewriter.apply(openapi_document)

        assert openapi_document["info"] == {"title": "Widgets API", "version": "1.0.0"}
        assert openapi_document["paths"] == {}

    def test_applying_twice_equals_applying_once(self, rewriter, openapi_document):
        rewriter.apply(openapi_document)
        once = copy.deepcopy(openapi_document)

        rewriter.apply(openapi_document)

        assert openapi_document == once

    @pytest.mark.parametrize("referrer_first", [True, False])
    def test_target_pointing_at_operation_schema(self, rewriter, openapi_document, schemas, referrer_first):
        audit = {
            "Audit": {"type": "object", "properties": {"last": ref("WidgetOperation")}},
            "AuditOperation": {"type": "object", "properties": {"operationType": ref("OperationType")}},
        }
        if referrer_first:
            schemas.update({**audit, **{name: schemas.pop(name) for name in list(schemas)}})
        else:
            schemas.update(audit)

        rewriter.apply(openapi_document)
        once = copy.deepcopy(openapi_document)
        rewriter.apply(openapi_document)

        assert openapi_document == once
        assert schemas["AuditOperation"]["properties"]["path"]["enum"] == [
            "/last",
            "/last/op",
            "/last/path",
            "/last/from",
            "/last/value",
        ]

    @pytest.mark.parametrize("referrer_first", [True, False])
    def test_target_pointing_at_patch_document(self, rewriter, openapi_document, schemas, referrer_first):
        job = {
            "Job": {"type": "object", "properties": {"patch": ref("WidgetPatchDocument")}},
            "JobOperation": {"type": "object", "properties": {}},
        }
        if referrer_first:
            schemas.update({**job, **{name: schemas.pop(name) for name in list(schemas)}})
        else:
            schemas.update(job)

        rewriter.apply(openapi_document)
        once = copy.deepcopy(openapi_document)
        rewriter.apply(openapi_document)

        assert openapi_document == once
        assert schemas["JobOperation"]["properties"]["path"]["enum"] == [
            "/patch",
            "/patch/operations",
            "/patch/operations/{0}",
            "/patch/operations/{0}/op",
            "/patch/operations/{0}/path",
            "/patch/operations/{0}/from",
            "/patch/operations/{0}/value",
        ]

    def test_apply_returns_none(self, rewriter, openapi_document):
        assert rewriter.apply(openapi_document) is None

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"openapi": "3.0.3", "paths": {}},
            {"components": {}},
            {"components": {"schemas": None}},
            {"components": None},
            [],
        ],
    )
    def test_documents_without_registry_are_ignored(self, rewriter, document):
        before = copy.deepcopy(document)

        rewriter.apply(document)

        assert document == before

    def test_custom_naming(self, openapi_document, schemas):
        schemas["GadgetJsonPatchDocument"] = schemas.pop("WidgetPatchDocument")
        naming = SchemaNaming(document_suffix="JsonPatchDocument")

        PatchSchemaRewriter(naming).apply(openapi_document)

        items = schemas["GadgetJsonPatchDocument"]["properties"]["operations"]["items"]
        assert items == ref("GadgetOperation")

    def test_module_helper(self, openapi_document, schemas):
        rewrite_patch_schemas(openapi_document)

        assert schemas["WidgetPatchDocument"]["properties"] == document_properties("WidgetOperation")


@pytest.mark.unit
class TestGetSchemaRegistry:
    def test_returns_the_live_registry(self, openapi_document):
        assert get_schema_registry(openapi_document) is openapi_document["components"]["schemas"]

    def test_none_when_missing(self):
        assert get_schema_registry({"components": {}}) is None
