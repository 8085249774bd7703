"""
Settings package initialization with automatic environment detection.

Environment Detection Priority:
1. DJANGO_ENV environment variable (explicit override)
2. CI markers (GITHUB_ACTIONS, GITLAB_CI, CIRCLECI, CI) → ci
3. Default → local (development)

Usage:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "docs_backend.settings")

    # To override environment:
    export DJANGO_ENV=local
    export DJANGO_ENV=ci
"""

import os


def get_environment() -> str:
    """
    Auto-detect the current environment.

    Returns:
        str: Environment name ('local' or 'ci')
    """
    # 1. Explicit override via DJANGO_ENV
    django_env = os.getenv("DJANGO_ENV", "").lower()
    if django_env in ("local", "ci"):
        return django_env

    # 2. CI/CD detection
    if os.getenv("GITHUB_ACTIONS") == "true":
        return "ci"
    if os.getenv("GITLAB_CI") == "true":
        return "ci"
    if os.getenv("CIRCLECI") == "true":
        return "ci"
    if os.getenv("CI") == "true":
        return "ci"

    # 3. Default to local development
    return "local"


environment = get_environment()

if environment == "ci":
    from .ci import *  # noqa: F403
else:  # local
    from .local import *  # noqa: F403

# Export environment for runtime introspection
ENVIRONMENT = environment
