"""Load form descriptions from YAML and JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from formforge.fields.registry import FieldRegistry
from formforge.forms.form import Form

logger = logging.getLogger(__name__)

FORM_FILE_PATTERNS = ("*.yaml", "*.yml", "*.json")


def read_form_file(path: Path) -> Any:
    """Read one description file; JSON files by extension, everything else as YAML."""
    with open(path) as f:
        if path.suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def form_files(forms_path: Path) -> list[Path]:
    """Every form description file directly under ``forms_path``, sorted by name."""
    files = {path for pattern in FORM_FILE_PATTERNS for path in forms_path.glob(pattern)}
    return sorted(files)


class FormConfigLoader:
    """Loads form descriptions from forms/*.yaml, *.yml and *.json files.

    Each file holds one description under a top-level ``form`` key. Forms
    are keyed by their ``id``, falling back to the file name.
    """

    def __init__(self, forms_path: Path, registry: FieldRegistry | None = None):
        self.forms_path = forms_path
        self.registry = registry
        self.forms: dict[str, dict[str, Any]] = {}
        self.sources: dict[str, Path] = {}

    def load_all(self) -> None:
        """Load all form descriptions from the forms directory."""
        if not self.forms_path.exists():
            logger.debug("Forms path %s does not exist", self.forms_path)
            return

        for form_file in form_files(self.forms_path):
            data = read_form_file(form_file)
            if not isinstance(data, dict) or "form" not in data:
                logger.warning("Skipping %s: no top-level 'form' key", form_file)
                continue
            form_data = data["form"] or {}
            if not isinstance(form_data, dict):
                logger.warning("Skipping %s: 'form' is not a mapping", form_file)
                continue
            description = dict(form_data)
            description.setdefault("id", form_file.stem)
            form_id = str(description["id"])
            if form_id in self.forms:
                logger.warning(
                    "Form '%s' in %s replaces the one from %s",
                    form_id,
                    form_file,
                    self.sources[form_id],
                )
            self.forms[form_id] = description
            self.sources[form_id] = form_file
            logger.debug("Loaded form '%s' from %s", form_id, form_file)

    def get_description(self, form_id: str) -> dict[str, Any] | None:
        """Get a form's raw description by id."""
        return self.forms.get(form_id)

    def get_form(self, form_id: str) -> Form | None:
        """Parse a loaded form by id; each call builds a fresh Form."""
        description = self.forms.get(form_id)
        if description is None:
            return None
        return Form.parse(description, self.registry)

    def list_forms(self) -> list[str]:
        """List the ids of all loaded forms."""
        return list(self.forms)
