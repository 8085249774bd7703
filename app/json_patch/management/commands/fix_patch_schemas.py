"""
Rewrite the JSON Patch schemas of an exported OpenAPI document.

Use this on schema files produced outside the live schema view, e.g. the
output of `spectacular --file schema.yaml` from a project without the hook.

Usage:
    django-admin fix_patch_schemas schema.yaml
    django-admin fix_patch_schemas schema.json --output fixed.json
    django-admin fix_patch_schemas schema.yaml --dry-run
"""

import copy
import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
import yaml

from json_patch.naming import SchemaNaming
from json_patch.rewriter import PatchSchemaRewriter, get_schema_registry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class Command(BaseCommand):
    help = "Rewrite JSON Patch operation and patch-document schemas in an OpenAPI file"

    def add_arguments(self, parser):
        parser.add_argument("schema_file", type=str, help="OpenAPI document (JSON or YAML)")
        parser.add_argument(
            "--output",
            type=str,
            default=None,
            help="Where to write the result (default: overwrite schema_file)",
        )
        parser.add_argument(
            "--format",
            type=str,
            default=None,
            choices=["json", "yaml"],
            help="Document format (default: from the file extension)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report changed schemas without writing anything",
        )

    def handle(self, *args, **options):
        source = Path(options["schema_file"])
        output = Path(options["output"]) if options.get("output") else source
        fmt = options.get("format") or ("yaml" if source.suffix.lower() in YAML_SUFFIXES else "json")
        dry_run = options.get("dry_run", False)

        document = self._load(source, fmt)
        before = copy.deepcopy(get_schema_registry(document) or {})

        PatchSchemaRewriter(SchemaNaming.from_settings()).apply(document)

        after = get_schema_registry(document) or {}
        removed = sorted(set(before) - set(after))
        changed = sorted(name for name in after if name in before and before[name] != after[name])

        for name in removed:
            self.stdout.write(f"Removed {name}")
        for name in changed:
            self.stdout.write(f"Rewrote {name}")

        if not removed and not changed:
            self.stdout.write(self.style.SUCCESS("No JSON Patch schemas to rewrite"))
            return

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - nothing written"))
            return

        self._dump(document, output, fmt)
        logger.info("Wrote rewritten schema to %s", output)
        self.stdout.write(
            self.style.SUCCESS(f"Rewrote {len(changed)} and removed {len(removed)} schemas in {output}")
        )

    def _load(self, path: Path, fmt: str):
        try:
            with path.open("r", encoding="utf-8") as fh:
                document = yaml.safe_load(fh) if fmt == "yaml" else json.load(fh)
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise CommandError(f"Cannot parse {path} as {fmt}: {e}") from e

        if not isinstance(document, dict):
            raise CommandError(f"{path} does not contain an OpenAPI document")
        return document

    def _dump(self, document, path: Path, fmt: str) -> None:
        try:
            with path.open("w", encoding="utf-8") as fh:
                if fmt == "yaml":
                    yaml.safe_dump(document, fh, sort_keys=False, allow_unicode=True)
                else:
                    json.dump(document, fh, indent=2)
                    fh.write("\n")
        except OSError as e:
            raise CommandError(f"Cannot write {path}: {e}") from e
