"""FormForge field types.

A field is one input-producing unit of a form. Types are resolved by name
through a FieldRegistry when forms are parsed from descriptions.

Usage:
    from formforge.fields import Field, Text, get_default_registry

    email = Field.parse({"id": "email", "type": "Text", "required": True})
    html = email.render()
"""

from formforge.fields.base import CONTAINER_CLASSES, INPUT_CLASSES, OPTIONAL, REQUIRED, Field
from formforge.fields.buttons import Button, ResetButton, SubmitButton, is_button_type
from formforge.fields.elements import Hidden, Note
from formforge.fields.entries import EntryField, File, Honeypot, Number, Password, Text, TextArea
from formforge.fields.registry import (
    FieldRegistry,
    get_default_registry,
    register_builtin_fields,
)
from formforge.fields.selections import (
    SelectionField,
    SelectMany,
    SelectOne,
    SelectOneWithOther,
)

__all__ = [
    # Base
    "Field",
    "REQUIRED",
    "OPTIONAL",
    "INPUT_CLASSES",
    "CONTAINER_CLASSES",
    # Registry
    "FieldRegistry",
    "get_default_registry",
    "register_builtin_fields",
    # Entries
    "EntryField",
    "Text",
    "Password",
    "Number",
    "File",
    "Honeypot",
    "TextArea",
    # Elements
    "Hidden",
    "Note",
    # Selections
    "SelectionField",
    "SelectOne",
    "SelectMany",
    "SelectOneWithOther",
    # Buttons
    "Button",
    "SubmitButton",
    "ResetButton",
    "is_button_type",
]
