import pytest

from localizer import (
    EMPTY,
    from_mapping,
    localize_string,
    localize_string_with_default,
    localize_text,
    localize_text_with_default,
    resolve,
)


@pytest.mark.parametrize("key", ["FirstName", "firstname", "FIRSTNAME", "fIrStNaMe"])
def test_lookup_is_case_insensitive(key):
    localization = from_mapping({"FirstName": "First Name:"})
    assert localize_string(key, localization) == "First Name:"


def test_text_suffix_tolerance():
    localization = from_mapping({"NAME.TEXT": "Title"})
    assert localize_string("Name", localization) == "Title"
    assert localize_string("Name.Text", localization) == "Title"


def test_error_suffix_tolerance():
    localization = from_mapping({"Save.Error": "Could not save"})
    assert localize_string("save", localization) == "Could not save"


def test_direct_match_beats_suffix_match():
    localization = from_mapping({"NAME": "A", "NAME.TEXT": "B", "NAME.ERROR": "C"})
    assert localize_string("Name", localization) == "A"


def test_text_suffix_beats_error_suffix():
    localization = from_mapping({"NAME.ERROR": "C", "NAME.TEXT": "B"})
    assert localize_string("name", localization) == "B"


def test_missing_key_is_bracketed_in_original_case():
    assert localize_string("foobar", EMPTY) == "[foobar]"
    assert localize_string("FooBar", from_mapping({"other": "x"})) == "[FooBar]"


def test_empty_key():
    assert localize_string("", EMPTY) == "[]"
    assert localize_string("", from_mapping({"": "blank"})) == "blank"
    assert localize_string("", from_mapping({".TEXT": "suffix only"})) == "suffix only"


def test_default_returned_verbatim():
    assert localize_string_with_default("Fallback Text", "missing", EMPTY) == "Fallback Text"


def test_default_ignored_on_hit():
    localization = from_mapping({"Greeting.Text": "Hello"})
    assert localize_string_with_default("nope", "greeting", localization) == "Hello"


def test_empty_string_value_is_a_hit():
    localization = from_mapping({"Blank": ""})
    assert localize_string("blank", localization) == ""
    assert resolve("blank", localization) == ""


def test_resolve_miss():
    assert resolve("anything", EMPTY) is None


def test_localize_text_hands_result_to_renderer():
    localization = from_mapping({"Title.Text": "Profile"})
    assert localize_text("title", localization, lambda s: ("text", s)) == ("text", "Profile")
    assert localize_text("nope", localization, str.upper) == "[NOPE]"
    assert localize_text_with_default("-", "nope", localization, list) == ["-"]
