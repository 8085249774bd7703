"""
Settings access for the JSON Patch schema rewriter.

Projects override the naming convention through a single dict setting:

    JSON_PATCH_SCHEMA = {
        "OPERATION_SUFFIX": "Operation",
        "DOCUMENT_SUFFIX": "PatchDocument",
        "CONTRACT_RESOLVER": "IContractResolver",
        "OPERATION_TYPE": "OperationType",
    }

Any key left out falls back to DEFAULTS.
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: dict[str, str] = {
    "OPERATION_SUFFIX": "Operation",
    "DOCUMENT_SUFFIX": "PatchDocument",
    "CONTRACT_RESOLVER": "IContractResolver",
    "OPERATION_TYPE": "OperationType",
}


def get_json_patch_settings() -> dict[str, Any]:
    """Return DEFAULTS merged with the project's JSON_PATCH_SCHEMA setting."""
    overrides = getattr(settings, "JSON_PATCH_SCHEMA", None) or {}
    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(f"Unknown JSON_PATCH_SCHEMA keys: {', '.join(sorted(unknown))}")
    return {**DEFAULTS, **overrides}
