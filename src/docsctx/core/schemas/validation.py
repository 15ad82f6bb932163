"""Shared schema validation utilities.

docsctx validates configuration and raw task metadata using JSON Schema.
Schemas are stored as YAML files (JSON Schema expressed in YAML).

Schema resolution order (highest priority → lowest):
1) Project schemas: ``.docsctx/schemas/``
2) Bundled defaults: ``docsctx.data/schemas/``
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from docsctx.core.exceptions import SchemaValidationError
from docsctx.core.utils.io import read_yaml
from docsctx.core.utils.paths import get_project_config_dir
from docsctx.data import get_data_path


def _iter_schema_dirs(repo_root: Optional[Path] = None) -> List[Path]:
    """Return schema search roots in priority order."""
    roots: List[Path] = []
    if repo_root is not None:
        roots.append(get_project_config_dir(repo_root) / "schemas")
    roots.append(get_data_path("schemas"))
    return roots


def load_schema(schema_name: str, *, repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load a schema dict from project or bundled schema directories.

    Appends ``.schema.yaml`` when ``schema_name`` has no extension, so
    ``"config"`` resolves to ``config.schema.yaml``.

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        ValueError: If the schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.schema.yaml"

    for schemas_dir in _iter_schema_dirs(repo_root):
        candidate = schemas_dir / schema_name
        if candidate.exists():
            schema = read_yaml(candidate, default=None, raise_on_error=True)
            if not isinstance(schema, dict):
                raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
            return schema

    searched = "\n".join(f"- {p}" for p in _iter_schema_dirs(repo_root))
    raise FileNotFoundError(f"Schema not found: {schema_name}\nSearched:\n{searched}")


def validate_payload(
    payload: Dict[str, Any],
    schema_name: str,
    *,
    repo_root: Optional[Path] = None,
) -> None:
    """Validate a payload against a JSON schema.

    Raises:
        SchemaValidationError: If validation fails.
    """
    schema = load_schema(schema_name, repo_root=repo_root)
    try:
        jsonschema.validate(instance=payload, schema=schema, cls=Draft202012Validator)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}' at {location}: {exc.message}",
            context={"schema": schema_name, "path": location},
        ) from exc


def validate_payload_safe(
    payload: Dict[str, Any],
    schema_name: str,
    *,
    repo_root: Optional[Path] = None,
) -> List[str]:
    """Validate a payload and return error messages (empty if valid)."""
    schema = load_schema(schema_name, repo_root=repo_root)
    validator = Draft202012Validator(schema)
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path]):
        location = "/".join(str(p) for p in error.absolute_path) or "<root>"
        errors.append(f"{location}: {error.message}")
    return errors


__all__ = ["load_schema", "validate_payload", "validate_payload_safe"]
