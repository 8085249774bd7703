"""
Schema postprocessing hooks for drf-spectacular.
"""

from json_patch.naming import SchemaNaming
from json_patch.rewriter import PatchSchemaRewriter


def fix_json_patch_schemas(result, generator=None, request=None, public=True):
    """
    Replace generated JSON Patch schemas with operation-level schemas.

    Patch documents come out of the generator as the generic container
    type, with a leaked contract resolver component. This removes the
    resolver, limits every `<Model>Operation` to the pointers of `<Model>`
    and turns every `<Model>PatchDocument` into a list of those operations.

    Runs after postprocess_schema_enums so the enum components it may
    delete are final.
    """
    # 'result' is the schema dict returned by the generator
    if not isinstance(result, dict):
        return result

    PatchSchemaRewriter(SchemaNaming.from_settings()).apply(result)
    return result
