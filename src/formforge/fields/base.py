"""The Field contract shared by every concrete field type.

A Field is one input-producing unit of a form. Concrete types (Text,
SelectMany, SubmitButton, ...) only decide their markup template and which
additional attributes they splice into it; identity, classes, options,
value and error state all live here.

Fields are built either directly::

    email = Text("email")
    email.required = True

or from a description through the registry::

    field = Field.parse({"id": "email", "type": "Text", "required": True})
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TextIO

from formforge.core.coerce import (
    as_bool,
    coerce_attributes,
    coerce_classes,
    coerce_options,
    coerce_validation,
    coerce_value,
)
from formforge.core.errors import (
    FieldError,
    FormForgeError,
    InvalidFieldValueError,
    UnknownPropertyError,
)
from formforge.core.strings import unique_token, unsanitize_string
from formforge.fields.markup import attributes, emit, esc, join_classes

if TYPE_CHECKING:
    from formforge.fields.registry import FieldRegistry

REQUIRED = True
OPTIONAL = False

# Class lists a field keeps: one for its input element(s), one for the
# element that contains them.
INPUT_CLASSES = "input"
CONTAINER_CLASSES = "container"
CLASS_LISTS = (INPUT_CLASSES, CONTAINER_CLASSES)

_UNSET = object()


def load_description(
    data: str | Mapping[str, Any],
    what: str = "field",
    error: type[FormForgeError] = FieldError,
) -> dict[str, Any]:
    """Accept a JSON string or an already-decoded mapping.

    Keys holding JSON ``null`` are dropped so they fall back to defaults.

    Raises:
        FormForgeError: ``error`` (the caller's level) when the description
            is not a JSON object
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise error(f"{what.capitalize()} description is not valid JSON") from exc
    if not isinstance(data, Mapping):
        raise error(f"{what.capitalize()} description must be a JSON object")
    return {key: value for key, value in data.items() if value is not None}


class Field:
    """Base class for all field types.

    Subclasses implement :meth:`markup`. Class attributes describe the type:

    Attributes:
        kind: Short name the type is registered under (defaults to the class name)
        element_count: DOM elements that make up one logical field
    """

    kind: ClassVar[str] = "Field"
    element_count: ClassVar[int] = 1

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" not in cls.__dict__:
            cls.kind = cls.__name__

    def __init__(self, field_id: str, name: str = "", label: str = ""):
        # name falls back to id, label is derived from name
        name = name or field_id
        self.id = field_id
        self.name = name
        self.label = label or unsanitize_string(name)
        self.instructions = ""
        self.required = OPTIONAL
        self.options: dict[str, Any] = {}
        self.additional_attributes: dict[str, str] = {}
        self.validation: list = []
        self.error = False
        self.error_message = ""
        self.locked = False
        self._classes: dict[str, list[str]] = {which: [] for which in CLASS_LISTS}
        self._value = ""
        self._decoded_value: Any = _UNSET
        self._type = ""
        self._set_type()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, type={self._type!r})"

    # -------------------------------------------------------------------------
    # Parsing and serialization
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        data: str | Mapping[str, Any],
        registry: FieldRegistry | None = None,
    ) -> Field:
        """Build a live field from a FieldJSON description.

        The order of the first four properties matters: name defaults to id,
        label derives from name. ``type`` defaults to Text when parsing
        through ``Field`` and to the called class' own kind otherwise.

        Locked fields (such as Honeypot) keep the configuration their
        constructor set; only error state and value are applied to them.

        Args:
            data: JSON string or mapping
            registry: Field type catalog (the process default when omitted)

        Raises:
            UnknownFieldError: The type name is not registered
            InvalidClassesError: A classes property has an unusable type
        """
        from formforge.fields.registry import get_default_registry

        description = load_description(data)

        field_id = str(description.get("id") or unique_token("field"))
        name = str(description.get("name") or field_id)
        label = str(description.get("label") or unsanitize_string(name))
        field_type = str(description.get("type") or ("Text" if cls is Field else cls.kind))

        field_class = (registry or get_default_registry()).get(field_type)
        field = field_class(field_id, name, label)

        if not field.is_locked():
            field.instructions = str(description.get("instructions", ""))
            field.required = as_bool(description.get("required", OPTIONAL))
            field.additional_attributes = coerce_attributes(
                description.get("additionalAttributes")
            )
            field.options = coerce_options(description.get("options"))
            field.validation = coerce_validation(description.get("validation"))

            input_key = "inputClasses" if "inputClasses" in description else "classes"
            field.set_classes(coerce_classes(description.get(input_key), input_key))
            field.set_classes(
                coerce_classes(description.get("containerClasses"), "containerClasses"),
                CONTAINER_CLASSES,
            )

        # error state and value apply even to locked fields
        message = str(description.get("errorMessage", ""))
        field.set_error(message)
        if as_bool(description.get("error", False)):
            field.error = True
        field.value = description.get("value", "")
        return field

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a FieldJSON mapping that :meth:`parse` accepts."""
        return {
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "type": self.kind,
            "classes": self.get_classes(),
            "containerClasses": self.get_classes(CONTAINER_CLASSES),
            "instructions": self.instructions,
            "required": self.required,
            "options": self.options,
            "additionalAttributes": self.additional_attributes,
            "validation": self.validation,
            "value": self._value,
            "error": self.error,
            "errorMessage": self.error_message,
        }

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def type(self) -> str:
        """The type tag, e.g. ``text`` or ``selectmany``. Fixed at construction."""
        return self._type

    def _set_type(self, field_type: str = "") -> None:
        self._type = field_type or type(self).__name__.lower()

    def get_id(self, suffix: str = "") -> str:
        """The DOM id, with ``-suffix`` appended for multi-element fields."""
        return f"{self.id}-{suffix}" if suffix else self.id

    def get_name(self, suffix: str = "") -> str:
        """The submitted name, with ``-suffix`` appended for multi-element fields."""
        return f"{self.name}-{suffix}" if suffix else self.name

    def is_(self, field_id: str) -> bool:
        return self.id == field_id

    def is_locked(self) -> bool:
        return self.locked

    def is_empty(self) -> bool:
        return self._value == ""

    # -------------------------------------------------------------------------
    # Value and error state
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = coerce_value(value)
        self._decoded_value = _UNSET

    def set_error(self, message: str, value: Any = None) -> None:
        """Record an error message; an empty message clears the error flag.

        When ``value`` is given it replaces the field's value too, which is
        how submitted values are redisplayed alongside their errors.
        """
        self.error_message = message
        self.error = bool(message)
        if value is not None:
            self.value = value

    def reset_error(self, value: Any = None) -> None:
        self.set_error("", value)

    def decode_composite_value(self, default: Any = None) -> Any:
        """Decode a JSON-encoded value once and reuse the result.

        Composite fields (multi-selects, select-with-other) keep a JSON
        string in their single value slot. An empty value returns
        ``default`` without decoding.

        Raises:
            InvalidFieldValueError: The value is not valid JSON
        """
        if self.is_empty():
            return [] if default is None else default
        if self._decoded_value is _UNSET:
            try:
                self._decoded_value = json.loads(self._value)
            except ValueError as exc:
                raise InvalidFieldValueError(
                    f"{self._type} requires a JSON value, got {self._value!r}"
                ) from exc
        return self._decoded_value

    # -------------------------------------------------------------------------
    # Classes
    # -------------------------------------------------------------------------

    def _class_list(self, which: str) -> list[str]:
        if which not in self._classes:
            raise UnknownPropertyError(
                f"Unknown class list '{which}'; expected one of {', '.join(CLASS_LISTS)}"
            )
        return self._classes[which]

    def set_class(self, cls: str, which: str = INPUT_CLASSES) -> None:
        classes = self._class_list(which)
        if cls and cls not in classes:
            classes.append(cls)

    def set_classes(self, classes: Iterable[str], which: str = INPUT_CLASSES) -> None:
        """Merge classes into a list; existing entries keep their position."""
        for cls in classes:
            self.set_class(cls, which)

    def get_classes(self, which: str = INPUT_CLASSES) -> list[str]:
        return list(self._class_list(which))

    def get_classes_as_string(self, which: str = INPUT_CLASSES) -> str:
        return " ".join(self._class_list(which))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, display: bool = False, stream: TextIO | None = None) -> str:
        """Render this field's HTML fragment.

        When ``display`` is true the fragment is written to ``stream``
        (stdout by default) and an empty string is returned.
        """
        return emit(self.markup(), display, stream)

    def markup(self) -> str:
        raise NotImplementedError("Subclasses must implement markup()")

    def li_class(self, extra: Iterable[str] = ()) -> str:
        return join_classes(
            [*extra, "field", f"field-{self._type}", self.id, *self._classes[CONTAINER_CLASSES]]
        )

    def label_markup(self, extra: Iterable[str] = ()) -> str:
        classes = join_classes(
            [
                *extra,
                "required" if self.required else "optional",
                "error" if self.error else "no-error",
                self._type,
                self.name,
                self.id,
            ]
        )
        star = (
            '<i class="fa fa-star" aria-hidden="true" title="required"></i>'
            if self.required
            else ""
        )
        alert = f'<strong role="alert">{esc(self.error_message)}</strong>' if self.error else ""
        return (
            f'<label for="{esc(self.get_id())}" class="{esc(classes)}">'
            f"<span>{esc(self.label)}</span>{star}{alert}</label>"
        )

    def verbose_instructions(self) -> str:
        # instructions may carry author markup, so they are not escaped
        return f"<p>{self.instructions}</p>" if self.instructions else ""

    def required_attributes(self) -> str:
        return (
            ' aria-required="true" required' if self.required else ' aria-required="false"'
        )

    def spliced_attributes(self, names: Iterable[str]) -> str:
        """Render the named additional attributes that this field has set."""
        return attributes(
            {name: self.additional_attributes[name] for name in names if name in self.additional_attributes}
        )
