"""Tests for formforge.core.strings."""

from formforge.core.strings import sanitize_string, unique_token, unsanitize_string


class TestSanitizeString:
    def test_lowercases_and_replaces_non_word_runs(self):
        assert sanitize_string("First Name!") == "first-name-"

    def test_custom_replacement(self):
        assert sanitize_string("a b  c", "_") == "a_b_c"


class TestUnsanitizeString:
    def test_hyphens_and_underscores_become_spaces(self):
        assert unsanitize_string("first-name") == "First Name"
        assert unsanitize_string("zip_code") == "Zip Code"

    def test_only_first_letters_change(self):
        assert unsanitize_string("zipCode") == "ZipCode"

    def test_custom_pattern(self):
        assert unsanitize_string("a.b", r"\.") == "A B"

    def test_empty(self):
        assert unsanitize_string("") == ""


class TestUniqueToken:
    def test_prefix_and_uniqueness(self):
        first = unique_token("field")
        second = unique_token("field")
        assert first.startswith("field-")
        assert len(first) > len("field-")
        assert first != second
