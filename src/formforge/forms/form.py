"""Form: the root of the object graph.

A form owns ordered fieldsets and buttons plus the attributes of the
``<form>`` element itself. After a failed submission, errors and values
are pushed back into its fields by id with :meth:`Form.add_field_error` and
:meth:`Form.add_field_value`, then the form is rendered again.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TextIO

from formforge.core.coerce import coerce_classes
from formforge.core.errors import (
    FieldError,
    FieldsetError,
    FormError,
    NotAButtonError,
    NotAFieldsetError,
)
from formforge.core.strings import unique_token
from formforge.fields.base import Field, load_description
from formforge.fields.buttons import SubmitButton, is_button_type
from formforge.fields.markup import emit, esc
from formforge.fieldsets.fieldset import Fieldset

if TYPE_CHECKING:
    from formforge.fields.registry import FieldRegistry

ENCTYPES = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "text/plain",
)
ENCTYPE_DEFAULT = ENCTYPES[0]
ENCTYPE_URLENCODED = ENCTYPES[0]
ENCTYPE_MULTIPART = ENCTYPES[1]
ENCTYPE_TEXT = ENCTYPES[2]

METHODS = ("get", "post")


class Form:
    """An HTML form built from fieldsets and buttons.

    Attributes:
        default_button_label: Label of the submit button synthesised when
            no buttons were added
    """

    default_button_label: ClassVar[str] = "Submit"

    def __init__(self, form_id: str):
        self.id = form_id
        self.action = ""
        self.instructions = ""
        self.error = False
        self._method = "post"
        self._enctype = ENCTYPE_DEFAULT
        self._classes: list[str] = []
        self._fieldsets: list[Fieldset] = []
        self._buttons: list[Field] = []

    def __repr__(self) -> str:
        return f"Form(id={self.id!r}, fieldsets={len(self._fieldsets)})"

    # -------------------------------------------------------------------------
    # Parsing and serialization
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        data: str | Mapping[str, Any],
        registry: FieldRegistry | None = None,
    ) -> Form:
        """Build a form from a description.

        Args:
            data: Form JSON as a string or mapping
            registry: Field type catalog (the process default when omitted)

        Raises:
            FormError: The description is not a JSON object
            NotAFieldsetError: A fieldset failed to parse
            NotAButtonError: A button failed to parse or is not a button type
            InvalidClassesError: ``classes`` has an unusable type
        """
        description = load_description(data, "form", FormError)

        form = cls(str(description.get("id") or unique_token("form")))
        form.action = str(description.get("action", ""))
        form.method = str(description.get("method", "post"))
        form.enctype = str(description.get("enctype", ENCTYPE_DEFAULT))
        form.instructions = str(description.get("instructions", ""))
        form.set_classes(coerce_classes(description.get("classes")))

        for entry in description.get("fieldsets") or []:
            try:
                form.add_fieldset(Fieldset.parse(entry, registry))
            except FieldsetError as exc:
                raise NotAFieldsetError(
                    f"Form '{form.id}' could not add a fieldset: {exc}"
                ) from exc

        for entry in description.get("buttons") or []:
            try:
                button = Field.parse(entry, registry)
            except FieldError as exc:
                raise NotAButtonError(
                    f"Form '{form.id}' could not add a button: {exc}"
                ) from exc
            form.add_button(button)
        return form

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a form description that :meth:`parse` accepts."""
        return {
            "id": self.id,
            "action": self.action,
            "method": self._method,
            "enctype": self._enctype,
            "instructions": self.instructions,
            "classes": list(self._classes),
            "fieldsets": [fieldset.to_dict() for fieldset in self._fieldsets],
            "buttons": [button.to_dict() for button in self._buttons],
        }

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @property
    def method(self) -> str:
        return self._method

    @method.setter
    def method(self, method: str) -> None:
        method = method.lower()
        self._method = method if method in METHODS else "post"

    @property
    def enctype(self) -> str:
        """The enctype as set; see :meth:`effective_enctype` for what renders."""
        return self._enctype

    @enctype.setter
    def enctype(self, enctype: str) -> None:
        self._enctype = enctype if enctype in ENCTYPES else ENCTYPE_DEFAULT

    def effective_enctype(self) -> str:
        """The enctype to render: multipart whenever a post form holds a file field."""
        if (
            self._method == "post"
            and self._enctype != ENCTYPE_MULTIPART
            and self.has_field_of_type("file")
        ):
            return ENCTYPE_MULTIPART
        return self._enctype

    def set_class(self, cls: str) -> None:
        if cls and cls not in self._classes:
            self._classes.append(cls)

    def set_classes(self, classes: Iterable[str]) -> None:
        for cls in classes:
            self.set_class(cls)

    def get_classes(self) -> list[str]:
        return list(self._classes)

    def get_classes_as_string(self) -> str:
        return " ".join(self._classes)

    def set_error(self, instructions: str, state: bool = True) -> None:
        """Set the form-level message and error flag together."""
        self.instructions = instructions
        self.error = state

    def reset_error(self, instructions: str = "") -> None:
        self.set_error(instructions, False)

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def add_fieldset(self, fieldset: Fieldset) -> None:
        if not isinstance(fieldset, Fieldset):
            raise NotAFieldsetError(
                f"Form '{self.id}' can only add fieldsets, got {type(fieldset).__name__}"
            )
        self._fieldsets.append(fieldset)

    def add_fieldsets(self, fieldsets: Iterable[Fieldset]) -> None:
        for fieldset in fieldsets:
            self.add_fieldset(fieldset)

    def get_fieldsets(self) -> list[Fieldset]:
        return list(self._fieldsets)

    def add_button(self, button: Field) -> None:
        """Add a button-family field.

        Raises:
            NotAButtonError: The field's type tag does not denote a button
        """
        if not isinstance(button, Field) or not is_button_type(button.type):
            raise NotAButtonError(
                f"Form '{self.id}' cannot add {button!r} as a button"
            )
        self._buttons.append(button)

    def add_buttons(self, buttons: Iterable[Field]) -> None:
        for button in buttons:
            self.add_button(button)

    def get_buttons(self) -> list[Field]:
        return list(self._buttons)

    # -------------------------------------------------------------------------
    # Lookup and feedback
    # -------------------------------------------------------------------------

    def get_fields(self) -> dict[str, Field]:
        """Every field in every fieldset, keyed by id, in rendering order."""
        return {
            field.id: field for fieldset in self._fieldsets for field in fieldset.iter_fields()
        }

    def get_field(self, field_id: str) -> Field | None:
        for fieldset in self._fieldsets:
            field = fieldset.get_field(field_id)
            if field is not None:
                return field
        return None

    def has_field(self, field_id: str) -> bool:
        return any(fieldset.has_field(field_id) for fieldset in self._fieldsets)

    def has_field_of_type(self, field_type: str) -> bool:
        return any(fieldset.has_field_of_type(field_type) for fieldset in self._fieldsets)

    def add_field_error(self, field_id: str, message: str, value: Any = None) -> bool:
        """Give the first fieldset holding ``field_id`` an error for it.

        Returns:
            False when no fieldset in this form holds the id
        """
        for fieldset in self._fieldsets:
            if fieldset.has_field(field_id):
                return fieldset.add_error(field_id, message, value)
        return False

    def add_field_value(self, field_id: str, value: Any) -> bool:
        return self.add_field_error(field_id, "", value)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, display: bool = False, stream: TextIO | None = None) -> str:
        attributes = [("id", self.id), ("method", self._method)]
        attributes.append(("class", self.get_classes_as_string()))
        if self.action:
            attributes.append(("action", self.action))
        if self._method == "post":
            attributes.append(("enctype", self.effective_enctype()))
        opening = "".join(f' {name}="{esc(value)}"' for name, value in attributes)

        fragment = (
            f"<form{opening}>{self.verbose_instructions()}"
            f"{''.join(fieldset.render() for fieldset in self._fieldsets)}"
            f"{self.buttons_markup()}</form>"
        )
        return emit(fragment, display, stream)

    def verbose_instructions(self) -> str:
        classes = "instructions"
        content = ""
        if self.instructions:
            if self.error:
                classes += " notice notice-error"
            content = f"<p>{self.instructions}</p>"
        return f'<div class="{classes}">{content}</div>'

    def buttons_markup(self) -> str:
        buttons = self._buttons or [self.default_button()]
        return "".join(button.render() for button in buttons)

    def default_button(self) -> Field:
        return SubmitButton(f"{self.id}-submit", label=self.default_button_label)
