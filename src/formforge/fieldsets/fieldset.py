"""Fieldset: a named, ordered group of fields and child fieldsets.

Entries are kept in a mapping keyed by id, so insertion order is
rendering order and a repeated id replaces the earlier entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, TextIO

from formforge.core.coerce import as_bool, coerce_classes
from formforge.core.errors import (
    FieldError,
    FieldsetError,
    NeitherFieldNorFieldsetError,
    NotAFieldError,
    NotAFieldsetError,
)
from formforge.core.strings import unique_token, unsanitize_string
from formforge.fields.base import Field, load_description
from formforge.fields.markup import emit, esc, join_classes

if TYPE_CHECKING:
    from formforge.fields.registry import FieldRegistry

CHILD_CLASS = "child"


def is_fieldset_description(entry: Mapping[str, Any]) -> bool:
    """Whether an entry in a ``fields`` list describes a child fieldset."""
    return "type" not in entry and ("fields" in entry or "legend" in entry)


class Fieldset:
    """A group of fields rendered as ``<fieldset>`` with a legend.

    A fieldset marked ``child`` renders inside a list item so it can sit in
    its parent's ``<ol>`` next to the parent's fields.
    """

    def __init__(self, fieldset_id: str, legend: str = ""):
        self.id = fieldset_id
        self.legend = legend or unsanitize_string(fieldset_id)
        self.instructions = ""
        self.child = False
        self._classes: list[str] = []
        self._fields: dict[str, Field | Fieldset] = {}

    def __repr__(self) -> str:
        return f"Fieldset(id={self.id!r}, entries={len(self._fields)})"

    # -------------------------------------------------------------------------
    # Parsing and serialization
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        data: str | Mapping[str, Any],
        registry: FieldRegistry | None = None,
    ) -> Fieldset:
        """Build a fieldset, its fields and any child fieldsets from a description.

        Args:
            data: FieldsetJSON as a string or mapping
            registry: Field type catalog (the process default when omitted)

        Raises:
            FieldsetError: The description is not a JSON object
            NotAFieldError: A field entry failed to parse; the field's error
                is attached as ``__cause__``
            InvalidClassesError: ``classes`` has an unusable type
        """
        description = load_description(data, "fieldset", FieldsetError)

        fieldset_id = str(description.get("id") or unique_token("fieldset"))
        fieldset = cls(fieldset_id, str(description.get("legend") or ""))
        fieldset.child = as_bool(description.get("child", False))
        fieldset.instructions = str(description.get("instructions", ""))
        fieldset.set_classes(coerce_classes(description.get("classes")))

        for entry in description.get("fields") or []:
            if isinstance(entry, Mapping) and is_fieldset_description(entry):
                fieldset.add_fieldset(cls.parse(entry, registry))
                continue
            try:
                fieldset.add_field(Field.parse(entry, registry))
            except FieldError as exc:
                raise NotAFieldError(
                    f"Fieldset '{fieldset_id}' could not add a field: {exc}"
                ) from exc
        return fieldset

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a FieldsetJSON mapping that :meth:`parse` accepts."""
        return {
            "id": self.id,
            "legend": self.legend,
            "child": self.child,
            "instructions": self.instructions,
            "classes": list(self._classes),
            "fields": [entry.to_dict() for entry in self._fields.values()],
        }

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def add_field(self, field: Field) -> None:
        if not isinstance(field, Field):
            raise NotAFieldError(
                f"Fieldset '{self.id}' can only add fields, got {type(field).__name__}"
            )
        self._fields[field.id] = field

    def add_fields(self, fields: Iterable[Field]) -> None:
        for field in fields:
            self.add_field(field)

    def add_fieldset(self, fieldset: Fieldset) -> None:
        """Nest a fieldset; it is marked as a child if it is not already."""
        if not isinstance(fieldset, Fieldset):
            raise NotAFieldsetError(
                f"Fieldset '{self.id}' can only nest fieldsets, got {type(fieldset).__name__}"
            )
        fieldset.child = True
        self._fields[fieldset.id] = fieldset

    def add_fieldsets(self, fieldsets: Iterable[Fieldset]) -> None:
        for fieldset in fieldsets:
            self.add_fieldset(fieldset)

    def get_fields(self) -> dict[str, Field | Fieldset]:
        """This fieldset's own entries, fields and child fieldsets, in order."""
        return dict(self._fields)

    def iter_fields(self) -> Iterator[Field]:
        """Every field in this fieldset and its children, depth first."""
        for entry in self._fields.values():
            if isinstance(entry, Fieldset):
                yield from entry.iter_fields()
            else:
                yield entry

    def children(self) -> list[Fieldset]:
        return [entry for entry in self._fields.values() if isinstance(entry, Fieldset)]

    # -------------------------------------------------------------------------
    # Lookup and feedback
    # -------------------------------------------------------------------------

    def has_field(self, field_id: str) -> bool:
        if isinstance(self._fields.get(field_id), Field):
            return True
        return any(child.has_field(field_id) for child in self.children())

    def get_field(self, field_id: str) -> Field | None:
        entry = self._fields.get(field_id)
        if isinstance(entry, Field):
            return entry
        for child in self.children():
            field = child.get_field(field_id)
            if field is not None:
                return field
        return None

    def has_field_of_type(self, field_type: str) -> bool:
        """Whether any field, here or in a child, has the given type tag (e.g. ``file``)."""
        return any(field.type == field_type for field in self.iter_fields())

    def add_error(self, field_id: str, message: str, value: Any = None) -> bool:
        """Set a field's error message and optionally its value.

        Returns:
            Whether a field with that id was found
        """
        field = self.get_field(field_id)
        if field is None:
            return False
        field.set_error(message, value)
        return True

    def add_value(self, field_id: str, value: Any) -> bool:
        """Set a field's value; this also clears any error it had."""
        return self.add_error(field_id, "", value)

    # -------------------------------------------------------------------------
    # Classes
    # -------------------------------------------------------------------------

    def set_class(self, cls: str) -> None:
        if cls and cls not in self._classes:
            self._classes.append(cls)

    def set_classes(self, classes: Iterable[str]) -> None:
        for cls in classes:
            self.set_class(cls)

    def get_classes(self) -> list[str]:
        classes = list(self._classes)
        if self.child and CHILD_CLASS not in classes:
            classes.append(CHILD_CLASS)
        return classes

    def get_classes_as_string(self) -> str:
        return " ".join(self.get_classes())

    def container_classes(self) -> str:
        return join_classes(
            ["field", "field-fieldset", "field-fieldset-child", f"field-fieldset-{self.id}"]
        )

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, display: bool = False, stream: TextIO | None = None) -> str:
        """Render the fieldset and everything in it.

        Raises:
            NeitherFieldNorFieldsetError: An entry is neither a Field nor a Fieldset
        """
        instructions = f"<p>{self.instructions}</p>" if self.instructions else ""
        fragment = (
            f'<fieldset id="{esc(self.id)}" class="{esc(self.get_classes_as_string())}">'
            f'<legend><label for="{esc(self.id)}">{esc(self.legend)}</label></legend>'
            f"{instructions}<ol>{self.contents()}</ol></fieldset>"
        )
        if self.child:
            fragment = f'<li class="{esc(self.container_classes())}">{fragment}</li>'
        return emit(fragment, display, stream)

    def contents(self) -> str:
        parts = []
        for entry in self._fields.values():
            if not isinstance(entry, (Field, Fieldset)):
                raise NeitherFieldNorFieldsetError(
                    f"Fieldset '{self.id}' cannot render a {type(entry).__name__}"
                )
            parts.append(entry.render())
        return "".join(parts)
