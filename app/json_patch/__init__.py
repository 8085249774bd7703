"""
JSON Patch schema support for drf-spectacular.

Contains:
- naming: suffix convention used to pair patch documents with their operations
- paths: JSON pointer derivation for patch targets
- builders: operation and patch-document schema fragments
- rewriter: the document rewrite applied after schema generation
"""

__all__ = [
    "builders",
    "naming",
    "paths",
    "rewriter",
]
