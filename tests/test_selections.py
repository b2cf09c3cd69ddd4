"""Tests for the selection fields: SelectOne, SelectMany, SelectOneWithOther."""

import re

import pytest

from formforge.core.errors import OptionsRequiredError, OptionsTooDeepError
from formforge.fields import Field, SelectMany, SelectOne, SelectOneWithOther

FIVE = {"a": "A", "b": "B", "c": "C", "d": "D", "e": "E"}


class TestSelectOne:
    def test_few_options_render_radios(self):
        field = Field.parse(
            {"id": "color", "type": "SelectOne", "options": "red green blue", "value": "green"}
        )
        html = field.render()
        assert html.startswith('<li class="fieldset field field-selectone color">')
        assert '<fieldset id="color"><legend>' in html
        assert html.count('type="radio"') == 3
        assert (
            '<li class="radio"><label><input type="radio" name="color" value="green" '
            'class="" checked><span class="radio-label">green</span></label></li>'
        ) in html
        assert html.count(" checked") == 1
        assert "<select" not in html

    def test_five_options_render_select(self):
        field = SelectOne("letter")
        field.options = FIVE
        field.value = "c"
        html = field.render()
        assert '<select id="letter" name="letter" class="" aria-required="false">' in html
        assert '<option value="c" selected>C</option>' in html
        assert '<option value="a">A</option>' in html
        assert 'type="radio"' not in html

    def test_extra_type_overrides_default(self):
        field = SelectOne("letter")
        field.options = FIVE
        field.extra_type = "fieldset"
        assert 'type="radio"' in field.render()
        field.extra_type = "dropdown"
        assert field.extra_type == ""
        assert "<select" in field.render()

    def test_grouped_options_render_optgroups(self):
        field = Field.parse(
            {
                "id": "food",
                "type": "SelectOne",
                "options": {"Fruit": ["apple", "pear"], "Veg": {"k": "Kale"}},
                "value": "k",
            }
        )
        field.extra_type = "select"
        html = field.render()
        assert (
            '<optgroup label="Fruit"><option value="apple">apple</option>'
            '<option value="pear">pear</option></optgroup>'
        ) in html
        assert '<optgroup label="Veg"><option value="k" selected>Kale</option></optgroup>' in html

    def test_grouped_options_cannot_be_radios(self):
        field = SelectOne("food")
        field.options = {"Fruit": {"apple": "Apple"}}
        with pytest.raises(OptionsTooDeepError):
            field.render()

    def test_three_levels_are_too_deep(self):
        field = SelectOne("food")
        field.options = {"A": {"B": {"c": "C"}}}
        field.extra_type = "select"
        with pytest.raises(OptionsTooDeepError) as exc_info:
            field.render()
        assert exc_info.value.code == "OPTIONS_TOO_DEEP"

    def test_options_required(self):
        with pytest.raises(OptionsRequiredError):
            SelectOne("empty").render()

    def test_option_labels_are_escaped(self):
        field = SelectOne("x")
        field.options = {"lt": "<less>"}
        assert "&lt;less&gt;" in field.render()


class TestSelectMany:
    def test_checkboxes_by_default(self):
        field = Field.parse(
            {
                "id": "tags",
                "type": "SelectMany",
                "options": ["a", "b", "c", "d", "e", "f"],
                "value": '["a","c"]',
            }
        )
        html = field.render()
        assert html.count('type="checkbox"') == 6
        assert 'name="tags[]"' in html
        assert html.count(" checked") == 2
        assert 'value="a" class="" checked>' in html
        assert 'value="c" class="" checked>' in html
        assert 'value="b" class="">' in html
        assert '<span class="checkbox-label">' in html

    def test_native_list_value(self):
        field = Field.parse(
            {"id": "tags", "type": "SelectMany", "options": "a b c", "value": ["b"]}
        )
        assert field.selected_values() == ["b"]
        assert field.render().count(" checked") == 1

    def test_select_multiple(self):
        field = SelectMany("tags")
        field.options = {str(n): str(n) for n in range(6)}
        field.value = ["1", "4"]
        field.extra_type = "select"
        html = field.render()
        assert '<select id="tags" name="tags[]" class="" size="3" multiple' in html
        assert html.count(" selected") == 2

    def test_select_size_is_capped(self):
        field = SelectMany("tags")
        field.options = {str(n): str(n) for n in range(40)}
        field.extra_type = "select"
        assert 'size="10" multiple' in field.render()

    def test_empty_value_selects_nothing(self):
        field = SelectMany("tags")
        field.options = {"a": "A"}
        assert " checked" not in field.render()


class TestSelectOneWithOther:
    @pytest.fixture
    def field(self):
        return Field.parse(
            {
                "id": "color",
                "type": "SelectOneWithOther",
                "options": {"red": "Red", "?": "Other"},
                "value": {"known": "?", "unknown": "teal"},
                "additionalAttributes": {"placeholder": "Which color?"},
            }
        )

    def test_two_elements(self, field):
        assert field.element_count == 2
        assert field.get_id() == "color-known"
        assert field.get_name("unknown") == "color-unknown"

    def test_always_a_select(self, field):
        field.extra_type = "fieldset"
        html = field.render()
        assert '<select id="color-known" name="color-known" class="with-other"' in html
        assert 'type="radio"' not in html
        assert '<label for="color-known"' in html

    def test_other_input_follows_select(self, field):
        html = field.render()
        assert (
            '</select><input type="text" id="color-unknown" name="color-unknown" '
            'class="with-other other" placeholder="Which color?" value="teal">'
        ) in html
        assert '<option value="?" selected>Other</option>' in html

    def test_other_hidden_unless_other_chosen(self):
        field = SelectOneWithOther("color")
        field.options = {"red": "Red", "?": "Other"}
        field.value = ["red", ""]
        html = field.render()
        assert 'class="with-other other other-hidden"' in html
        assert '<option value="red" selected>Red</option>' in html
        assert field.other == ""

    def test_script_matches_handler(self, field):
        html = field.render()
        handler = re.search(r'onchange="(selectWithOther_\w+)\(this\)"', html).group(1)
        assert f"function {handler}(select)" in html
        assert 'other.classList.toggle("other-hidden", value !== "?");' in html

    def test_split_value(self, field):
        assert field.split_value() == ("?", "teal")
        assert field.other == "teal"
