"""Tests for formforge.forms.Form."""

import io

import pytest

from formforge.core.errors import (
    FieldsetError,
    FormError,
    InvalidClassesError,
    NotAButtonError,
    NotAFieldError,
    NotAFieldsetError,
)
from formforge.fields import File, ResetButton, SubmitButton, Text
from formforge.fieldsets import Fieldset
from formforge.forms import ENCTYPE_DEFAULT, ENCTYPE_MULTIPART, ENCTYPE_TEXT, Form


def _upload_form(method: str = "post") -> Form:
    return Form.parse(
        {
            "id": "upload",
            "method": method,
            "fieldsets": [
                {"id": "files", "fields": [{"id": "cv", "type": "File"}]},
            ],
        }
    )


@pytest.fixture
def signup():
    return Form.parse(
        {
            "id": "signup",
            "action": "/signup",
            "classes": '["card", "narrow"]',
            "instructions": "All fields are required.",
            "fieldsets": [
                {
                    "id": "account",
                    "fields": [
                        {"id": "username", "type": "Text", "required": True},
                        {"id": "password", "type": "Password", "required": True},
                    ],
                },
                {"id": "profile", "fields": [{"id": "bio", "type": "TextArea"}]},
            ],
            "buttons": [{"id": "join", "type": "SubmitButton", "label": "Join"}],
        }
    )


class TestAttributes:
    @pytest.mark.parametrize(
        "method, expected", [("GET", "get"), ("POST", "post"), ("put", "post"), ("", "post")]
    )
    def test_method_normalised(self, method, expected):
        form = Form("f")
        form.method = method
        assert form.method == expected

    def test_enctype_validated(self):
        form = Form("f")
        form.enctype = ENCTYPE_TEXT
        assert form.enctype == ENCTYPE_TEXT
        form.enctype = "application/json"
        assert form.enctype == ENCTYPE_DEFAULT

    def test_set_and_reset_error(self):
        form = Form("f")
        form.set_error("Please fix the errors below.")
        assert form.error is True
        assert form.instructions == "Please fix the errors below."
        form.reset_error("Thanks!")
        assert form.error is False
        assert form.instructions == "Thanks!"


class TestParse:
    def test_structure(self, signup):
        assert signup.action == "/signup"
        assert signup.get_classes() == ["card", "narrow"]
        assert [fs.id for fs in signup.get_fieldsets()] == ["account", "profile"]
        assert list(signup.get_fields()) == ["username", "password", "bio"]
        assert [b.id for b in signup.get_buttons()] == ["join"]

    def test_fieldset_failures_are_wrapped(self):
        with pytest.raises(NotAFieldsetError) as exc_info:
            Form.parse({"id": "f", "fieldsets": [{"fields": [{"type": "Nope"}]}]})
        assert isinstance(exc_info.value.__cause__, NotAFieldError)
        assert isinstance(exc_info.value, FormError)

    @pytest.mark.parametrize("entry", ["oops", 42, ["a"]])
    def test_non_object_fieldset_entries_are_wrapped(self, entry):
        with pytest.raises(NotAFieldsetError) as exc_info:
            Form.parse({"id": "f", "fieldsets": [entry]})
        assert isinstance(exc_info.value.__cause__, FieldsetError)

    def test_non_object_description(self):
        with pytest.raises(FormError):
            Form.parse("not json")

    def test_non_button_rejected(self):
        with pytest.raises(NotAButtonError):
            Form.parse({"id": "f", "buttons": [{"id": "x", "type": "Text"}]})

    def test_button_parse_failures_are_wrapped(self):
        with pytest.raises(NotAButtonError):
            Form.parse({"id": "f", "buttons": [{"type": "NoSuchButton"}]})

    def test_invalid_classes(self):
        with pytest.raises(InvalidClassesError):
            Form.parse({"id": "f", "classes": 7})

    def test_round_trip(self, signup):
        again = Form.parse(signup.to_dict())
        assert again.to_dict()["fieldsets"] == signup.to_dict()["fieldsets"]
        assert again.action == "/signup"


class TestFeedback:
    def test_add_field_error(self, signup):
        assert signup.add_field_error("password", "Too short", "abc") is True
        password = signup.get_field("password")
        assert password.error_message == "Too short"
        assert signup.add_field_error("missing-id", "msg") is False

    def test_add_field_value(self, signup):
        assert signup.add_field_value("bio", "Hello") is True
        assert signup.get_field("bio").value == "Hello"
        assert "Hello</textarea>" in signup.render()

    def test_lookups(self, signup):
        assert signup.has_field("username")
        assert not signup.has_field("account")
        assert signup.has_field_of_type("password")
        assert signup.get_field("nope") is None


class TestAddButtons:
    def test_accepts_button_family(self):
        form = Form("f")
        form.add_buttons([SubmitButton("s"), ResetButton("r")])
        assert len(form.get_buttons()) == 2

    def test_rejects_other_fields(self):
        with pytest.raises(NotAButtonError):
            Form("f").add_button(Text("t"))

    def test_add_fieldsets_rejects_non_fieldsets(self):
        with pytest.raises(NotAFieldsetError):
            Form("f").add_fieldsets([Fieldset("a"), "b"])


class TestRender:
    def test_opening_tag(self, signup):
        html = signup.render()
        assert html.startswith(
            '<form id="signup" method="post" class="card narrow" action="/signup" '
            f'enctype="{ENCTYPE_DEFAULT}">'
        )
        assert html.endswith("</form>")

    def test_class_always_emitted(self):
        html = Form("bare").render()
        assert html.startswith('<form id="bare" method="post" class="" enctype=')
        assert "action=" not in html

    def test_instructions(self, signup):
        assert '<div class="instructions"><p>All fields are required.</p></div>' in signup.render()
        signup.set_error("Please fix the errors below.")
        assert (
            '<div class="instructions notice notice-error">'
            "<p>Please fix the errors below.</p></div>"
        ) in signup.render()

    def test_empty_instructions_div(self):
        assert '<div class="instructions"></div>' in Form("f").render()

    def test_file_field_upgrades_enctype(self):
        form = _upload_form()
        assert form.enctype == ENCTYPE_DEFAULT
        assert f'enctype="{ENCTYPE_MULTIPART}"' in form.render()
        assert form.effective_enctype() == ENCTYPE_MULTIPART
        # rendering does not change the configured enctype
        assert form.enctype == ENCTYPE_DEFAULT

    def test_get_form_never_has_enctype(self):
        html = _upload_form("get").render()
        assert "enctype" not in html

    def test_file_in_child_fieldset_upgrades_enctype(self):
        form = Form("f")
        parent, child = Fieldset("p"), Fieldset("c")
        child.add_field(File("cv"))
        parent.add_fieldset(child)
        form.add_fieldset(parent)
        assert form.effective_enctype() == ENCTYPE_MULTIPART

    def test_default_button(self):
        html = Form("f").render()
        assert html.count("<button") == 1
        assert '<button type="submit"' in html
        assert "</i>Submit</button>" in html

    def test_default_button_label(self):
        form = Form("f")
        form.default_button_label = "Send"
        assert "</i>Send</button>" in form.render()

    def test_explicit_button_only(self, signup):
        html = signup.render()
        assert html.count("<button") == 1
        assert "</i>Join</button>" in html

    def test_display(self):
        stream = io.StringIO()
        assert Form("f").render(display=True, stream=stream) == ""
        assert stream.getvalue().startswith('<form id="f"')
