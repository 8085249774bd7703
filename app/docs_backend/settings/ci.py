"""
CI/CD testing settings.
Optimized for fast test execution in CI pipelines (GitHub Actions, GitLab CI, etc.).

- In-memory database for speed
- Console-only logging (no file I/O)
"""

import copy

# Import all base settings
from .base import *  # noqa: F403

# CI/CD overrides
DEBUG = True  # Enable debug for better error messages in CI logs
SECRET_KEY = "ci-test-secret-key-not-for-production"

# Allowed hosts for CI
ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

# CI Database - In-memory SQLite for maximum speed
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
        "TEST": {
            "NAME": ":memory:",
        },
    }
}

# CI Logging - console only, regardless of environment
USE_FILE_LOGGING = False
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING["handlers"] = {
    "console": {
        "class": "logging.StreamHandler",
        "formatter": "verbose",
    },
}
LOGGING["root"]["handlers"] = ["console"]
for _logger in LOGGING["loggers"].values():
    _logger["handlers"] = ["console"]

# Tests configure naming explicitly
JSON_PATCH_SCHEMA = {}
