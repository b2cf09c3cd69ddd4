"""Tests for formforge.forms.FormBuilder."""

import json

import pytest

from formforge.core.errors import BuilderError, MissingFieldTypeError, MissingLegendError
from formforge.forms import Form, FormBuilder


@pytest.fixture
def builder():
    builder = FormBuilder({"id": "signup", "action": "/signup", "colour": "blue"})
    builder.open_fieldset({"id": "you", "legend": "About You", "collapsed": True})
    builder.add_field({"type": "Text", "id": "name", "required": True, "widget": "x"})
    builder.add_field({"type": "Number", "id": "age"})
    return builder


class TestFormBuilder:
    def test_build_returns_json(self, builder):
        data = json.loads(builder.build())
        assert data["id"] == "signup"
        assert data["fieldsets"][0]["legend"] == "About You"
        assert [f["id"] for f in data["fieldsets"][0]["fields"]] == ["name", "age"]

    def test_unknown_keys_filtered(self, builder):
        data = builder.to_dict()
        assert "colour" not in data
        assert "collapsed" not in data["fieldsets"][0]
        assert "widget" not in data["fieldsets"][0]["fields"][0]

    def test_fields_go_to_latest_fieldset(self, builder):
        builder.open_fieldset({"legend": "Extras"})
        builder.add_field({"type": "TextArea", "id": "notes"})
        data = builder.to_dict()
        assert [f["id"] for f in data["fieldsets"][1]["fields"]] == ["notes"]
        assert len(data["fieldsets"][0]["fields"]) == 2

    def test_missing_legend(self):
        with pytest.raises(MissingLegendError) as exc_info:
            FormBuilder().open_fieldset({"id": "x"})
        assert exc_info.value.code == "MISSING_LEGEND"

    def test_missing_field_type(self, builder):
        with pytest.raises(MissingFieldTypeError):
            builder.add_field({"id": "nameless"})

    def test_field_without_open_fieldset(self):
        with pytest.raises(BuilderError):
            FormBuilder().add_field({"type": "Text", "id": "x"})

    def test_add_button(self, builder):
        builder.add_button({"type": "SubmitButton", "label": "Sign Up"})
        assert builder.to_dict()["buttons"][0]["label"] == "Sign Up"

    def test_build_form(self, builder):
        builder.add_button({"type": "ResetButton", "id": "clear"})
        form = builder.build_form()
        assert isinstance(form, Form)
        assert form.action == "/signup"
        assert form.get_field("name").required is True
        assert form.get_fieldsets()[0].legend == "About You"
        assert '<button type="reset"' in form.render()
