"""Selection fields: SelectOne, SelectMany, SelectOneWithOther.

All three share one option renderer and pick between two displays: a
``<select>`` element or a fieldset of radio buttons/checkboxes. The
variants differ in a handful of class attributes and in how they read the
selected value(s) out of the field's value slot.
"""

from collections.abc import Mapping
from typing import Any, ClassVar

from formforge.core.errors import OptionsRequiredError, OptionsTooDeepError
from formforge.core.strings import unique_token
from formforge.fields.base import Field
from formforge.fields.markup import esc

SELECT = "select"
FIELDSET = "fieldset"
DISPLAYS = (SELECT, FIELDSET)

# options may hold one level of groups inside a <select>; a fieldset of
# inputs cannot group at all
SELECT_DEPTH = 2
FIELDSET_DEPTH = 1


def options_depth(options: Mapping[str, Any]) -> int:
    """Nesting depth of an option mapping; a flat mapping is 1."""
    groups = [label for label in options.values() if isinstance(label, Mapping)]
    return 1 + max((options_depth(group) for group in groups), default=0)


class SelectionField(Field):
    """Shared option rendering for the selection variants.

    Attributes:
        input_type: Input type used in the fieldset display
        multiple: Whether more than one option may be chosen
    """

    input_type: ClassVar[str] = "radio"
    multiple: ClassVar[bool] = False

    def __init__(self, field_id: str, name: str = "", label: str = ""):
        super().__init__(field_id, name, label)
        self._extra_type = ""

    @property
    def extra_type(self) -> str:
        """Requested display, ``select`` or ``fieldset``; empty means automatic."""
        return self._extra_type

    @extra_type.setter
    def extra_type(self, extra_type: str) -> None:
        self._extra_type = extra_type if extra_type in DISPLAYS else ""

    def default_display(self) -> str:
        return SELECT if len(self.options) >= 5 else FIELDSET

    def display_mode(self) -> str:
        return self._extra_type or self.default_display()

    def selected_values(self) -> list[str]:
        return [self.value]

    def is_selected(self, option_value: str) -> bool:
        return option_value in self.selected_values()

    def validate_options(self, acceptable_depth: int) -> int:
        """Check the options can be rendered and return their depth.

        Raises:
            OptionsRequiredError: There are no options
            OptionsTooDeepError: The options nest deeper than allowed
        """
        if not self.options:
            raise OptionsRequiredError(f"Cannot build selection '{self.id}': no options")
        depth = options_depth(self.options)
        if depth > acceptable_depth:
            raise OptionsTooDeepError(
                f"Cannot build selection '{self.id}': options too deep "
                f"({depth} levels, at most {acceptable_depth})"
            )
        return depth

    def markup(self) -> str:
        if self.display_mode() == SELECT:
            return self.select_markup()
        return self.fieldset_markup()

    # -------------------------------------------------------------------------
    # <select> display
    # -------------------------------------------------------------------------

    def select_markup(self) -> str:
        return (
            f'<li class="{esc(self.li_class())}">'
            f"{self.label_markup()}{self.verbose_instructions()}"
            f'<select id="{esc(self.get_id())}" name="{esc(self.select_name())}" '
            f'class="{esc(self.get_classes_as_string())}"'
            f"{self.select_attributes()}{self.required_attributes()}>"
            f"{self.options_markup()}</select>{self.after_select()}</li>"
        )

    def select_name(self) -> str:
        return self.get_name()

    def select_attributes(self) -> str:
        return ""

    def after_select(self) -> str:
        return ""

    def options_markup(self) -> str:
        self.validate_options(SELECT_DEPTH)
        parts = []
        for value, label in self.options.items():
            if isinstance(label, Mapping):
                parts.append(
                    f'<optgroup label="{esc(value)}">{self._option_tags(label)}</optgroup>'
                )
            else:
                parts.append(self._option_tags({value: label}))
        return "".join(parts)

    def _option_tags(self, options: Mapping[str, Any]) -> str:
        return "".join(
            f'<option value="{esc(value)}"{" selected" if self.is_selected(value) else ""}>'
            f"{esc(label)}</option>"
            for value, label in options.items()
        )

    # -------------------------------------------------------------------------
    # fieldset display
    # -------------------------------------------------------------------------

    def fieldset_markup(self) -> str:
        return (
            f'<li class="{esc(self.li_class([FIELDSET]))}">'
            f'<fieldset id="{esc(self.get_id())}"><legend>{self.label_markup()}</legend>'
            f"{self.verbose_instructions()}<ol>{self.inputs_markup()}</ol></fieldset></li>"
        )

    def input_name(self) -> str:
        return self.get_name()

    def inputs_markup(self) -> str:
        self.validate_options(FIELDSET_DEPTH)
        kind = self.input_type
        return "".join(
            f'<li class="{kind}"><label>'
            f'<input type="{kind}" name="{esc(self.input_name())}" value="{esc(value)}" '
            f'class="{esc(self.get_classes_as_string())}"'
            f'{" checked" if self.is_selected(value) else ""}>'
            f'<span class="{kind}-label">{esc(label)}</span></label></li>'
            for value, label in self.options.items()
        )


class SelectOne(SelectionField):
    """One choice: a ``<select>`` for 5+ options, radio buttons otherwise."""


class SelectMany(SelectionField):
    """Several choices: checkboxes by default, or ``<select multiple>``.

    The value is a JSON array of the chosen option values; submitted names
    carry ``[]`` so the browser sends every checked option.
    """

    input_type = "checkbox"
    multiple = True

    def default_display(self) -> str:
        return FIELDSET

    def selected_values(self) -> list[str]:
        decoded = self.decode_composite_value([])
        if isinstance(decoded, list):
            return [str(item) for item in decoded]
        if isinstance(decoded, Mapping):
            return [str(item) for item in decoded.values()]
        return [str(decoded)]

    def select_name(self) -> str:
        return f"{self.get_name()}[]"

    def input_name(self) -> str:
        return f"{self.get_name()}[]"

    def select_attributes(self) -> str:
        size = min(len(self.options) // 2, 10)
        return f' size="{size}" multiple'


class SelectOneWithOther(SelectionField):
    """A ``<select>`` followed by a text input for an unlisted answer.

    Choosing the ``?`` option reveals the text input. Both elements submit
    separately (``<name>-known`` and ``<name>-unknown``), so the value is a
    JSON object ``{"known": ..., "unknown": ...}`` or a two-item array.
    """

    element_count = 2
    other_option: ClassVar[str] = "?"

    def __init__(self, field_id: str, name: str = "", label: str = ""):
        super().__init__(field_id, name, label)
        self.set_class("with-other")
        self._script_name = ""

    def get_id(self, suffix: str = "known") -> str:
        return super().get_id(suffix)

    def get_name(self, suffix: str = "known") -> str:
        return super().get_name(suffix)

    def default_display(self) -> str:
        return SELECT

    def display_mode(self) -> str:
        # the reveal script needs the <select>
        return SELECT

    def split_value(self) -> tuple[str, str]:
        """The selected option and the free-text answer."""
        decoded = self.decode_composite_value({"known": "", "unknown": ""})
        if isinstance(decoded, Mapping):
            return str(decoded.get("known", "")), str(decoded.get("unknown", ""))
        if isinstance(decoded, list):
            known, other = (list(decoded) + ["", ""])[:2]
            return str(known), str(other)
        return str(decoded), ""

    @property
    def other(self) -> str:
        return self.split_value()[1]

    def selected_values(self) -> list[str]:
        return [self.split_value()[0]]

    def select_markup(self) -> str:
        # computed once so the onchange handler and the script agree
        self._script_name = unique_token("selectWithOther").replace("-", "_")
        return super().select_markup()

    def select_attributes(self) -> str:
        return f' onchange="{self._script_name}(this)"'

    def after_select(self) -> str:
        known, other = self.split_value()
        hidden = "" if known == self.other_option else "other-hidden"
        classes = " ".join(filter(None, [self.get_classes_as_string(), "other", hidden]))
        return (
            f'<input type="text" id="{esc(self.get_id("unknown"))}" '
            f'name="{esc(self.get_name("unknown"))}" class="{esc(classes)}"'
            f'{self.spliced_attributes(["placeholder"])} value="{esc(other)}">'
            f"{self.script()}"
        )

    def script(self) -> str:
        return (
            '<script type="text/javascript">'
            f"function {self._script_name}(select) {{"
            "var other = select.nextElementSibling;"
            "var value = select.options[select.selectedIndex].value;"
            f'other.classList.toggle("other-hidden", value !== "{self.other_option}");'
            "}</script>"
        )
