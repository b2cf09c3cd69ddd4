"""Tests for formforge.validation."""

import pytest

from formforge.core.errors import (
    InvalidReturnTypeError,
    MimeNotFoundError,
    NoExtensionError,
    UnableToValidateError,
    UnknownValidationFunctionError,
)
from formforge.fields import Field
from formforge.validation import RuleMode, RuleSet, Validator, validate_fields


@pytest.fixture
def validator():
    return Validator()


class TestRules:
    @pytest.mark.parametrize(
        "rule, value, expected",
        [
            ("number", "3.5", True),
            ("number", "1e3", True),
            ("number", "abc", False),
            ("number", True, False),
            ("integer", "4.0", True),
            ("integer", 4, True),
            ("integer", "4.5", False),
            ("float", "4.5", True),
            ("float", "4", False),
            ("positive", "0.1", True),
            ("positive", "0", False),
            ("negative", -2, True),
            ("zero", "0.0", True),
            ("zero", "x", False),
            ("string", "x", True),
            ("string", 5, False),
            ("notEmpty", "  ", False),
            ("notEmpty", "a", True),
            ("email", "ada@example.com", True),
            ("email", "ada@", False),
            ("url", "https://example.com/path", True),
            ("url", "example.com", False),
            ("date", "2024-02-29", True),
            ("date", "2023-02-29", False),
            ("time", "14:30", True),
            ("time", "14:30:15", True),
            ("time", "25:00", False),
        ],
    )
    def test_builtin(self, validator, rule, value, expected):
        assert validator.validate(value, rule) is expected

    def test_lengths(self, validator):
        assert validator.validate("abc", "maxLength", 3)
        assert not validator.validate("abcd", "maxLength", "3")
        assert validator.validate("abc", "minLength", 2)
        assert not validator.validate(123, "maxLength", 5)

    def test_pattern(self, validator):
        assert validator.validate("AB-12", "pattern", r"[A-Z]{2}-\d+")
        assert not validator.validate("AB-12x", "pattern", r"[A-Z]{2}-\d+")

    def test_date_format(self, validator):
        assert validator.validate("29/02/2024", "date", "%d/%m/%Y")

    def test_uploaded_file_type(self, validator):
        assert validator.validate("cv.pdf", "uploadedFileType", "application/pdf")
        assert validator.validate("photo.PNG", "uploadedFileType", "image/*")
        assert validator.validate("cv.pdf", "uploadedFileType", ".doc", ".pdf")
        assert not validator.validate("cv.pdf", "uploadedFileType", "image/*")

    def test_uploaded_file_without_extension(self, validator):
        with pytest.raises(NoExtensionError):
            validator.validate("README", "uploadedFileType", "text/plain")

    def test_uploaded_file_with_unknown_extension(self, validator):
        with pytest.raises(MimeNotFoundError):
            validator.validate("data.zzqx", "uploadedFileType")


class TestValidate:
    def test_unknown_rule(self, validator):
        with pytest.raises(UnknownValidationFunctionError) as exc_info:
            validator.validate("x", "isPrime")
        assert exc_info.value.code == "UNKNOWN_FUNCTION"

    def test_non_bool_return(self, validator):
        validator.register_rule("sloppy", lambda value: "yes")
        with pytest.raises(InvalidReturnTypeError):
            validator.validate("x", "sloppy")

    def test_unusable_parameters(self, validator):
        with pytest.raises(UnableToValidateError) as exc_info:
            validator.validate("abc", "maxLength", "ten")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_parameters(self, validator):
        with pytest.raises(UnableToValidateError):
            validator.validate("abc", "maxLength")

    def test_register_rule(self, validator):
        validator.register_rule("even", lambda value: int(value) % 2 == 0)
        assert validator.has_rule("even")
        assert "even" in validator.list_rules()
        assert validator.validate("4", "even")

    def test_custom_table(self):
        validator = Validator({"yes": lambda value: True})
        assert validator.list_rules() == ["yes"]


class TestCombinators:
    def test_validate_all(self, validator):
        assert validator.validate_all("hi", ["string", ["maxLength", 3]])
        assert not validator.validate_all("hello", ["string", ["maxLength", 3]])

    def test_validate_any(self, validator):
        assert validator.validate_any("https://x.org", ["email", "url"])
        assert not validator.validate_any("nope", ["email", "url"])

    def test_validate_any_passes_parameters(self, validator):
        assert validator.validate_any("abc", [["maxLength", 3]])

    @pytest.mark.parametrize("method", ["validate_all", "validate_any"])
    def test_empty_rules(self, validator, method):
        with pytest.raises(UnknownValidationFunctionError):
            getattr(validator, method)("x", [])

    def test_errors_propagate(self, validator):
        with pytest.raises(UnknownValidationFunctionError):
            validator.validate_any("x", ["isPrime", "string"])

    def test_unusable_descriptor(self, validator):
        with pytest.raises(UnknownValidationFunctionError):
            validator.validate_all("x", [42])

    def test_rule_sets(self, validator):
        contact = Validator.get_rule_set(RuleMode.ANY, "email", "url")
        assert contact == RuleSet(RuleMode.ANY, ["email", "url"])
        assert validator.check("ada@example.com", contact)
        nested = Validator.get_rule_set("all", "string", contact)
        assert nested.mode is RuleMode.ALL
        assert validator.check("https://x.org", nested)
        assert not validator.check("plain", nested)


class TestValidateField:
    def test_required_empty_fails(self, validator):
        field = Field.parse({"id": "email", "required": True, "validation": "email"})
        assert validator.validate_field(field) is False

    def test_optional_empty_passes(self, validator):
        field = Field.parse({"id": "email", "validation": "email"})
        assert validator.validate_field(field) is True

    def test_rules_applied(self, validator):
        field = Field.parse({"id": "age", "validation": '["integer", ["maxLength", 3]]'})
        field.value = "42"
        assert validator.validate_field(field)
        field.value = "4.2"
        assert not validator.validate_field(field)

    def test_validate_fields(self):
        fields = [
            Field.parse({"id": "a", "required": True}),
            Field.parse({"id": "b", "value": "x", "validation": "number"}),
            Field.parse({"id": "c", "value": "7", "validation": "number"}),
        ]
        assert validate_fields(fields) == ["a", "b"]
