"""Shared fixtures: form description files on disk."""

import json
from pathlib import Path

import pytest
import yaml

CONTACT_FORM = {
    "form": {
        "id": "contact",
        "action": "/contact",
        "instructions": "We reply within a day.",
        "fieldsets": [
            {
                "id": "details",
                "legend": "Your Details",
                "fields": [
                    {"id": "name", "type": "Text", "required": True},
                    {"id": "email", "type": "Text", "validation": ["email"]},
                    {
                        "id": "topic",
                        "type": "SelectOne",
                        "options": {"sales": "Sales", "support": "Support"},
                    },
                ],
            }
        ],
    }
}

UPLOAD_FORM = {
    "form": {
        "id": "upload",
        "fieldsets": [{"id": "files", "fields": [{"id": "cv", "type": "File"}]}],
        "buttons": [{"id": "send", "type": "SubmitButton", "label": "Send"}],
    }
}


def _write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))
    return path


def _write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def forms_dir(tmp_path):
    """A forms directory holding one YAML and one JSON form."""
    forms = tmp_path / "forms"
    _write_yaml(forms / "contact.yaml", CONTACT_FORM)
    _write_json(forms / "upload.json", UPLOAD_FORM)
    return forms
