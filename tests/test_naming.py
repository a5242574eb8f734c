"""Tests for rncreate.naming."""

import pytest

from rncreate.naming import capitalize_first_letter, lowercase_first_letter


class TestCapitalizeFirstLetter:

    def test_upper_cases_first_character(self):
        assert capitalize_first_letter("sampleName") == "SampleName"

    def test_leaves_rest_untouched(self):
        assert capitalize_first_letter("aBC def") == "ABC def"

    def test_already_capitalized(self):
        assert capitalize_first_letter("Journey") == "Journey"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input(self, value):
        assert capitalize_first_letter(value) == ""

    def test_single_character(self):
        assert capitalize_first_letter("x") == "X"


class TestLowercaseFirstLetter:

    def test_lower_cases_first_character(self):
        assert lowercase_first_letter("DemoName") == "demoName"

    def test_leaves_rest_untouched(self):
        assert lowercase_first_letter("ABC") == "aBC"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input(self, value):
        assert lowercase_first_letter(value) == ""

    @pytest.mark.parametrize("value", ["userCard", "UserCard", "1st", "éclair"])
    def test_forms_share_tail(self, value):
        assert capitalize_first_letter(value)[1:] == value[1:]
        assert lowercase_first_letter(value)[1:] == value[1:]
        assert capitalize_first_letter(value)[0] == value[0].upper()
        assert lowercase_first_letter(value)[0] == value[0].lower()
