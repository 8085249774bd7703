"""
Base settings for docs_backend project.
Contains common settings shared across all environments.
Environment-specific settings inherit from this file.
"""

import os
from pathlib import Path
from typing import Any

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Logging configuration - Environment-based (12-factor app pattern)
# CI/Docker: Leave default (false) for console-only logging
# Servers: Set USE_FILE_LOGGING=true for JSON file logging
USE_FILE_LOGGING = os.getenv("USE_FILE_LOGGING", "false").lower() == "true"

# Create logs directory only if file logging is enabled
if USE_FILE_LOGGING:
    LOGS_DIR = BASE_DIR / "logs"
    LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Security key - Must be overridden in environment-specific settings
SECRET_KEY = os.getenv(
    "SECRET_KEY",
    "django-insecure-FALLBACK-KEY-DO-NOT-USE-IN-PRODUCTION-only-for-imports",
)

# Debug mode - Default to False for safety (overridden in environment settings)
DEBUG = False

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third-party apps
    "rest_framework",
    "drf_spectacular",  # OpenAPI schema generation
    "drf_spectacular_sidecar",  # Self-hosted Swagger UI assets
    # Local apps
    "json_patch",
]

# REST Framework configuration
REST_FRAMEWORK: dict[str, Any] = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}

# DRF Spectacular settings
SPECTACULAR_SETTINGS: dict[str, Any] = {
    "TITLE": "Docs Backend API",
    "DESCRIPTION": "OpenAPI documentation with accurate JSON Patch schemas",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "POSTPROCESSING_HOOKS": [
        "drf_spectacular.hooks.postprocess_schema_enums",
        "docs_backend.schema_hooks.fix_json_patch_schemas",
    ],
    # Self-hosted Swagger UI (no CDN)
    "SWAGGER_UI_DIST": "SIDECAR",
    "SWAGGER_UI_FAVICON_HREF": "SIDECAR",
    "REDOC_DIST": "SIDECAR",
    # Split request components would end in "Request" and miss the suffix convention
    "COMPONENT_SPLIT_REQUEST": False,
}

# JSON Patch schema naming - keys left out use json_patch.conf.DEFAULTS
JSON_PATCH_SCHEMA: dict[str, str] = {
    "DOCUMENT_SUFFIX": os.getenv("JSON_PATCH_DOCUMENT_SUFFIX", "PatchDocument"),
}

# Logging Configuration - Build handlers dynamically
_log_handlers: dict[str, dict[str, Any]] = {
    "console": {
        "class": "logging.StreamHandler",
        "formatter": "verbose",
    },
}

# Add file handler only if file logging is enabled
if USE_FILE_LOGGING:
    _log_handlers["file"] = {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": str(LOGS_DIR / "django.log"),
        "maxBytes": 1024 * 1024 * 10,  # 10MB
        "backupCount": 5,
        "formatter": "json",
    }

_default_handlers = ["console", "file"] if USE_FILE_LOGGING else ["console"]

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
            "style": "{",
        },
        "json": {
            "format": "%(asctime)s %(levelname)s %(name)s %(module)s %(funcName)s %(lineno)d %(message)s",
            "class": "pythonjsonlogger.jsonlogger.JsonFormatter",
        },
    },
    "handlers": _log_handlers,
    "root": {
        "handlers": _default_handlers,
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": _default_handlers,
            "level": "INFO",
            "propagate": False,
        },
        "json_patch": {
            "handlers": _default_handlers,
            "level": os.getenv("JSON_PATCH_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "docs_backend.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

# No models of our own; auth/contenttypes still expect a database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (Swagger UI assets from the sidecar)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
