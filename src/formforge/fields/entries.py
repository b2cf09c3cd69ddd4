"""Single-value entry fields: Text, Password, Number, File, Honeypot, TextArea.

Entry types share one ``<input>`` template. Each type is a row in a small
strategy table expressed as class attributes: which additional attributes
it splices in, any attributes it always forces, and whether the value is
echoed back into the element.
"""

from typing import ClassVar

from formforge.fields.base import Field
from formforge.fields.markup import attributes, esc

HONEYPOT_INSTRUCTIONS = (
    "If you're encountering this field, we apologize. It's used to try and "
    "stop bots from submitting this form, and it must remain blank. We've "
    "tried to hide it from legitimate (and welcome) visitors, like you, but "
    "it's not a foolproof thing. Please leave this one blank when you "
    "submit the form."
)


class EntryField(Field):
    """An ``<input>`` whose type attribute is the field's type tag."""

    splices: ClassVar[tuple[str, ...]] = ("maxlength", "placeholder")
    forced_attributes: ClassVar[dict[str, str]] = {}
    echoes_value: ClassVar[bool] = True

    def markup(self) -> str:
        value = f' value="{esc(self.value)}"' if self.echoes_value else ""
        return (
            f'<li class="{esc(self.li_class())}">'
            f"{self.label_markup()}{self.verbose_instructions()}"
            f'<input type="{esc(self.type)}" id="{esc(self.get_id())}" '
            f'name="{esc(self.get_name())}" class="{esc(self.get_classes_as_string())}"'
            f"{value}{attributes(self.forced_attributes)}"
            f"{self.spliced_attributes(self.splices)}{self.required_attributes()}>"
            f"{self.after_input()}</li>"
        )

    def after_input(self) -> str:
        return ""


class Text(EntryField):
    pass


class Password(EntryField):
    """Identical to Text apart from its type tag, and never echoes its value."""

    echoes_value = False


class Number(EntryField):
    splices = ("step", "min", "max", "placeholder")


class File(EntryField):
    """File input. Browsers cannot prefill one, so the current value is shown beside it."""

    splices = ("accept", "multiple")
    echoes_value = False
    value_label: ClassVar[str] = "Current file:"

    def after_input(self) -> str:
        if self.is_empty():
            return ""
        return (
            f'<span class="file-field-value">{esc(self.value_label)} '
            f"<em>{esc(self.value)}</em></span>"
        )


class Honeypot(EntryField):
    """A text input that must stay blank; bots tend to fill it in.

    The constructor fixes the type and instructions and locks the field so
    parsing a description cannot overwrite them.
    """

    forced_attributes = {"tabindex": "-1", "autocomplete": "off"}

    def __init__(self, field_id: str, name: str = "", label: str = ""):
        super().__init__(field_id, name, label)
        self.instructions = HONEYPOT_INSTRUCTIONS
        self._set_type("text")
        self.locked = True


class TextArea(Field):
    splices: ClassVar[tuple[str, ...]] = ("maxlength", "rows", "cols", "placeholder")

    def markup(self) -> str:
        return (
            f'<li class="{esc(self.li_class())}">'
            f"{self.label_markup()}{self.verbose_instructions()}"
            f'<textarea id="{esc(self.get_id())}" name="{esc(self.get_name())}" '
            f'class="{esc(self.get_classes_as_string())}"'
            f"{self.spliced_attributes(self.splices)}{self.required_attributes()}>"
            f"{esc(self.value)}</textarea></li>"
        )
