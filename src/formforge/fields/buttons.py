"""Button fields: Button, SubmitButton, ResetButton.

The three differ only by their ``type`` attribute and FontAwesome icon.
Their type tags (``button``, ``submitbutton``, ``resetbutton``) all contain
"button", which is how a form recognises the button family.
"""

from typing import ClassVar

from formforge.fields.base import Field
from formforge.fields.markup import esc

BUTTON_TYPES = ("button", "submit", "reset")
ICONS = ("fa-chevron-circle-right", "fa-save", "fa-undo")


def is_button_type(field_type: str) -> bool:
    return "button" in field_type.lower()


class Button(Field):
    default_button_type: ClassVar[str] = "button"
    default_icon: ClassVar[str] = "fa-chevron-circle-right"

    def __init__(self, field_id: str, name: str = "", label: str = ""):
        super().__init__(field_id, name, label)
        self._button_type = self.default_button_type
        self._icon = self.default_icon

    @property
    def button_type(self) -> str:
        return self._button_type

    @button_type.setter
    def button_type(self, button_type: str) -> None:
        self._button_type = button_type if button_type in BUTTON_TYPES else "button"

    @property
    def icon(self) -> str:
        return self._icon

    @icon.setter
    def icon(self, icon: str) -> None:
        self._icon = icon if icon in ICONS else self.default_icon

    def is_empty(self) -> bool:
        # buttons carry no entry but are never empty
        return False

    def label_markup(self, extra=()) -> str:
        return esc(self.label)

    def icon_markup(self) -> str:
        return f'<i class="fa fa-fw {esc(self._icon)}" aria-hidden="true"></i>'

    def markup(self) -> str:
        value = f' value="{esc(self.value)}"' if self.value else ""
        return (
            f'<button type="{self._button_type}" id="{esc(self.get_id())}" '
            f'name="{esc(self.get_name())}" class="{esc(self.get_classes_as_string())}"'
            f"{value}>{self.icon_markup()}{self.label_markup()}</button>"
        )


class SubmitButton(Button):
    default_button_type = "submit"
    default_icon = "fa-save"


class ResetButton(Button):
    default_button_type = "reset"
    default_icon = "fa-undo"
