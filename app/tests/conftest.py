import copy
import os

# Ensure DJANGO_SETTINGS_MODULE is defined before importing Django/DRF modules.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "docs_backend.settings")
os.environ.setdefault("DJANGO_ENV", "ci")  # Use CI settings for tests

import django
import pytest

django.setup()

from rest_framework.test import APIClient  # noqa: E402

from tests.documents import GENERATED_SCHEMAS  # noqa: E402


@pytest.fixture
def openapi_document():
    """An OpenAPI document with generated JSON Patch components."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Widgets API", "version": "1.0.0"},
        "paths": {},
        "components": {"schemas": copy.deepcopy(GENERATED_SCHEMAS)},
    }


@pytest.fixture
def schemas(openapi_document):
    return openapi_document["components"]["schemas"]


@pytest.fixture
def api_client():
    """A DRF API client for making unauthenticated requests."""
    return APIClient()
