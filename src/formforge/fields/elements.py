"""Fields that are not user entries: Hidden and Note."""

from formforge.fields.base import Field
from formforge.fields.markup import esc


class Hidden(Field):
    """A bare hidden input; no container, label or instructions."""

    def markup(self) -> str:
        return (
            f'<input type="hidden" id="{esc(self.get_id())}" '
            f'name="{esc(self.get_name())}" value="{esc(self.value)}">'
        )


class Note(Field):
    """Words only: instructions shown somewhere other than a fieldset's top."""

    def is_empty(self) -> bool:
        return False

    def markup(self) -> str:
        return f'<li class="{esc(self.li_class())}">{self.verbose_instructions()}</li>'
