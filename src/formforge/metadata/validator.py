"""
metadata/validator.py: validation for FormForge form description files.

Two passes:

- schema: each file is checked against ``schemas/form.schema.json``
  (JSON Schema Draft 2020-12)
- semantic: each description is parsed into a Form and rendered once, which
  catches unknown field types and selections without options

Usage:
    from formforge.metadata.validator import validate_forms_dir

    issues = validate_forms_dir(Path("forms"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from formforge.core.errors import FormForgeError
from formforge.fields.registry import FieldRegistry
from formforge.forms.form import Form
from formforge.forms.loader import form_files, read_form_file

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
FORM_SCHEMA = "form.schema.json"


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------


@dataclass
class ValidationIssue:
    """A single validation finding for a form description file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "form/fieldsets[0]/fields[1]"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema(name: str) -> dict[str, Any]:
    schema_path = _SCHEMAS_DIR / name
    with schema_path.open() as fh:
        return json.load(fh)


def _load_registry() -> Registry:
    """Build a jsonschema Registry containing the FormForge schemas."""
    schema = _load_schema(FORM_SCHEMA)
    resource = Resource(contents=schema, specification=DRAFT202012)
    return Registry().with_resources([(schema["$id"], resource)])


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _read(path: Path) -> tuple[Any, list[ValidationIssue]]:
    try:
        raw = read_form_file(path)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        return None, [ValidationIssue(file=path, message=f"Parse error: {exc}")]
    except OSError as exc:
        return None, [ValidationIssue(file=path, message=f"Cannot read file: {exc}")]
    if raw is None:
        return None, [
            ValidationIssue(file=path, message="File is empty or contains only whitespace")
        ]
    return raw, []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_form_file(
    path: Path,
    *,
    registry: Registry | None = None,
) -> list[ValidationIssue]:
    """
    Validate a single form description file against the form schema.

    Args:
        path:     Path to the YAML or JSON file to validate.
        registry: Pre-built schema registry.  Built automatically if omitted.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    raw, issues = _read(path)
    if issues:
        return issues

    if registry is None:
        registry = _load_registry()

    validator = Draft202012Validator(_load_schema(FORM_SCHEMA), registry=registry)
    for error in sorted(validator.iter_errors(raw), key=lambda e: list(map(str, e.path))):
        issues.append(ValidationIssue(file=path, message=error.message, path=_json_path(error)))
    return issues


def check_form_file(
    path: Path,
    *,
    field_registry: FieldRegistry | None = None,
) -> list[ValidationIssue]:
    """
    Parse and render the form in *path*, reporting anything that fails.

    Files without a top-level ``form`` key are left to the schema pass.
    """
    raw, issues = _read(path)
    if issues or not isinstance(raw, dict) or not isinstance(raw.get("form"), dict):
        return issues

    try:
        Form.parse(raw["form"], field_registry).render()
    except FormForgeError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ else ""
        issues.append(
            ValidationIssue(file=path, message=f"{exc.code}: {exc}{cause}", path="form")
        )
    return issues


def validate_forms_dir(
    forms_dir: Path,
    *,
    semantic: bool = False,
    field_registry: FieldRegistry | None = None,
) -> list[ValidationIssue]:
    """
    Validate every form description file directly under *forms_dir*.

    Args:
        forms_dir:      Directory holding ``*.yaml``, ``*.yml`` and ``*.json`` files.
        semantic:       Also parse and render each form (see :func:`check_form_file`).
        field_registry: Field types for the semantic pass.

    Returns:
        A flat list of :class:`ValidationIssue` objects across all files.
        Empty list means all files are valid.
    """
    if not forms_dir.is_dir():
        return [
            ValidationIssue(
                file=forms_dir,
                message=f"Forms directory does not exist: {forms_dir}",
            )
        ]

    # Build registry once, shared across all file validations
    try:
        registry = _load_registry()
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        return [
            ValidationIssue(
                file=_SCHEMAS_DIR,
                message=f"Failed to load JSON Schema files: {exc}",
            )
        ]

    all_issues: list[ValidationIssue] = []
    for path in form_files(forms_dir):
        logger.debug("Validating %s", path)
        file_issues = validate_form_file(path, registry=registry)
        if semantic and not file_issues:
            file_issues = check_form_file(path, field_registry=field_registry)
        all_issues.extend(file_issues)
    return all_issues
