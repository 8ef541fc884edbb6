"""Tests for placeholder key substitution.

Covers:
- Each of the four tokens and its casing
- Identity on text without tokens
- Empty text and empty names
- Sequential application and substring matching
- The opt-in word-boundary mode
"""

from __future__ import annotations

import pytest

from component_scaffold.errors import InvalidArgumentError
from component_scaffold.scaffolder.keys import (
    PLACEHOLDER_KEYS,
    placeholder_values,
    replace_keys,
    validate_name,
)


pytestmark = pytest.mark.unit


class TestPlaceholderValues:
    def test_four_keys_in_order(self):
        assert PLACEHOLDER_KEYS == (
            "COMPONENT_NAME",
            "component_name",
            "COMPONENT_CAP_NAME",
            "cOMPONENT_NAME",
        )

    def test_values_for_pascal_name(self):
        assert placeholder_values("MyButton") == {
            "COMPONENT_NAME": "MyButton",
            "component_name": "mybutton",
            "COMPONENT_CAP_NAME": "MYBUTTON",
            "cOMPONENT_NAME": "myButton",
        }

    def test_single_character_name(self):
        assert placeholder_values("X")["cOMPONENT_NAME"] == "x"

    def test_internal_casing_untouched(self):
        assert placeholder_values("XMLParser")["cOMPONENT_NAME"] == "xMLParser"


class TestReplaceKeys:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("COMPONENT_NAME", "FooBar"),
            ("component_name", "foobar"),
            ("COMPONENT_CAP_NAME", "FOOBAR"),
            ("cOMPONENT_NAME", "fooBar"),
        ],
    )
    def test_each_token(self, token, expected):
        assert replace_keys(token, "FooBar") == expected

    @pytest.mark.parametrize(
        "token", ["COMPONENT_NAME", "component_name", "COMPONENT_CAP_NAME", "cOMPONENT_NAME"]
    )
    def test_idempotent(self, token):
        once = replace_keys(token, "FooBar")
        assert replace_keys(once, "FooBar") == once

    def test_identity_without_tokens(self):
        text = "const Button = () => null\n"
        assert replace_keys(text, "Card") == text

    def test_empty_text(self):
        assert replace_keys("", "Card") == ""

    def test_every_occurrence_replaced(self):
        text = "COMPONENT_NAME and COMPONENT_NAME in component_name.js"
        assert replace_keys(text, "Card") == "Card and Card in card.js"

    def test_mixed_tokens(self):
        text = "export const COMPONENT_CAP_NAME_ID = 'cOMPONENT_NAME'"
        assert replace_keys(text, "NavBar") == "export const NAVBAR_ID = 'navBar'"

    def test_matches_inside_longer_identifier(self):
        assert replace_keys("MYCOMPONENT_NAME_X", "Card") == "MYCard_X"

    def test_path_substitution(self):
        assert replace_keys("styles/COMPONENT_NAME.module.css", "Card") == "styles/Card.module.css"

    def test_later_token_sees_earlier_replacement(self):
        # The name itself contains a token that is checked afterwards.
        assert replace_keys("COMPONENT_NAME", "Xcomponent_name") == "Xxcomponent_name"

    def test_empty_name_raises(self):
        with pytest.raises(InvalidArgumentError):
            replace_keys("COMPONENT_NAME", "")

    def test_empty_name_raises_on_empty_text(self):
        with pytest.raises(InvalidArgumentError):
            replace_keys("", "")

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            replace_keys("anything", "")


class TestWordBoundary:
    def test_skips_embedded_token(self):
        assert replace_keys("MYCOMPONENT_NAME_X", "Card", word_boundary=True) == "MYCOMPONENT_NAME_X"

    def test_replaces_standalone_token(self):
        text = "import COMPONENT_NAME from './COMPONENT_NAME'"
        assert replace_keys(text, "Card", word_boundary=True) == "import Card from './Card'"

    def test_file_name_with_extension(self):
        assert replace_keys("COMPONENT_NAME.css", "Card", word_boundary=True) == "Card.css"

    def test_replacement_with_backslash_is_literal(self):
        assert replace_keys("COMPONENT_NAME", r"A\1", word_boundary=True) == r"A\1"


class TestValidateName:
    def test_returns_name(self):
        assert validate_name("Card") == "Card"

    @pytest.mark.parametrize("bad", ["", None, 3])
    def test_rejects(self, bad):
        with pytest.raises(InvalidArgumentError):
            validate_name(bad)
