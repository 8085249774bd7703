"""
Tests for the drf-spectacular postprocessing hooks.
"""

import pytest

from docs_backend.schema_hooks import fix_json_patch_schemas
from tests.documents import ref


@pytest.mark.unit
class TestFixJsonPatchSchemas:
    def test_returns_the_rewritten_result(self, openapi_document, schemas):
        result = fix_json_patch_schemas(openapi_document, generator=None, request=None, public=True)

        assert result is openapi_document
        assert "IContractResolver" not in schemas
        assert list(schemas["WidgetPatchDocument"]["properties"]) == ["operations"]

    def test_non_dict_result_is_passed_through(self):
        assert fix_json_patch_schemas(None) is None
        assert fix_json_patch_schemas("openapi: 3.0.3") == "openapi: 3.0.3"

    def test_naming_comes_from_settings(self, settings, openapi_document, schemas):
        settings.JSON_PATCH_SCHEMA = {"DOCUMENT_SUFFIX": "JsonPatchDocument"}
        schemas["GadgetJsonPatchDocument"] = {"type": "object", "properties": {}}

        fix_json_patch_schemas(openapi_document)

        items = schemas["GadgetJsonPatchDocument"]["properties"]["operations"]["items"]
        assert items == ref("GadgetOperation")
        # Only matched through its resolver reference, so the full name is the base
        items = schemas["WidgetPatchDocument"]["properties"]["operations"]["items"]
        assert items == ref("WidgetPatchDocumentOperation")
