"""
Local development settings.
Inherits from base.py with development-specific overrides.

This is the ONLY place where .env files are loaded.
"""

import copy
import os
from pathlib import Path

# Load .env ONLY in local development
try:
    from dotenv import load_dotenv

    env_path = Path(__file__).resolve().parent.parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        print(f"[LOCAL] Loaded .env from: {env_path}")
except ImportError:
    print("[LOCAL] python-dotenv not installed - using system environment variables only")

# Import all base settings
from .base import *  # noqa: E402, F403

# Development overrides
DEBUG = True

# Development secret key (never use in production)
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-not-for-production-change-in-env-file")

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Show every rebuilt schema while developing
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
LOGGING["loggers"]["json_patch"]["level"] = os.getenv("JSON_PATCH_LOG_LEVEL", "DEBUG")
