"""FormBuilder: assemble a form description one call at a time.

The builder only collects plain data; :meth:`FormBuilder.build` returns the
JSON that :meth:`Form.parse` reads, and :meth:`FormBuilder.build_form` parses
it straight away.

Example:
    builder = FormBuilder({"id": "signup", "action": "/signup"})
    builder.open_fieldset({"legend": "About You"})
    builder.add_field({"type": "Text", "id": "name", "required": True})
    builder.add_button({"type": "SubmitButton", "label": "Sign Up"})
    form = builder.build_form()
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from formforge.core.errors import BuilderError, MissingFieldTypeError, MissingLegendError
from formforge.forms.form import Form

if TYPE_CHECKING:
    from formforge.fields.registry import FieldRegistry

FORM_KEYS = frozenset(
    {"id", "action", "method", "enctype", "instructions", "classes", "fieldsets", "buttons"}
)
FIELDSET_KEYS = frozenset({"id", "legend", "child", "instructions", "classes", "fields"})
FIELD_KEYS = frozenset(
    {
        "id",
        "name",
        "label",
        "type",
        "classes",
        "inputClasses",
        "containerClasses",
        "instructions",
        "required",
        "options",
        "additionalAttributes",
        "validation",
        "value",
        "error",
        "errorMessage",
    }
)


def _filter_keys(description: Mapping[str, Any], keys: frozenset[str]) -> dict[str, Any]:
    return {key: value for key, value in description.items() if key in keys}


class FormBuilder:
    """Collects form, fieldset, field and button descriptions.

    Keys that are not part of the description format are dropped, so a
    builder can be fed straight from a larger configuration mapping.
    """

    def __init__(self, description: Mapping[str, Any] | None = None):
        self._form = _filter_keys(description or {}, FORM_KEYS)
        self._form.setdefault("fieldsets", [])
        self._form.setdefault("buttons", [])
        self._current: dict[str, Any] | None = None

    def open_fieldset(self, description: Mapping[str, Any]) -> None:
        """Start a fieldset; following fields are added to it.

        Raises:
            MissingLegendError: The description has no legend
        """
        if not description.get("legend"):
            raise MissingLegendError("Fieldsets require legends")
        fieldset = _filter_keys(description, FIELDSET_KEYS)
        fieldset.setdefault("fields", [])
        self._form["fieldsets"].append(fieldset)
        self._current = fieldset

    def add_field(self, description: Mapping[str, Any]) -> None:
        """Add a field to the open fieldset.

        Raises:
            MissingFieldTypeError: The description has no type
            BuilderError: No fieldset has been opened
        """
        if not description.get("type"):
            raise MissingFieldTypeError("Fields require a type")
        if self._current is None:
            raise BuilderError("Open a fieldset before adding fields")
        self._current["fields"].append(_filter_keys(description, FIELD_KEYS))

    def add_button(self, description: Mapping[str, Any]) -> None:
        """Add a button to the form.

        Raises:
            MissingFieldTypeError: The description has no type
        """
        if not description.get("type"):
            raise MissingFieldTypeError("Buttons require a type")
        self._form["buttons"].append(_filter_keys(description, FIELD_KEYS))

    def to_dict(self) -> dict[str, Any]:
        return json.loads(self.build())

    def build(self) -> str:
        """The form description as JSON."""
        return json.dumps(self._form)

    def build_form(self, registry: FieldRegistry | None = None) -> Form:
        return Form.parse(self.build(), registry)
