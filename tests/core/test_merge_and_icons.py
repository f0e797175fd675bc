"""Deep merge and icon parsing tests."""

from envelope_client.core.icons import parse_icon
from envelope_client.core.merge import deep_merge


def test_nested_mappings_merge_key_by_key():
    merged = deep_merge({"headers": {"A": "1"}, "x": 1}, {"headers": {"B": "2"}})
    assert merged == {"headers": {"A": "1", "B": "2"}, "x": 1}


def test_scalars_replace_and_inputs_are_untouched():
    base = {"headers": {"A": "1"}}
    merged = deep_merge(base, {"headers": {"A": "9"}})
    merged["headers"]["C"] = "3"
    assert base == {"headers": {"A": "1"}}


def test_parse_icon_with_theme():
    assert parse_icon("outlined:user") == {"theme": "outlined", "type": "user"}


def test_parse_icon_type_only_and_default():
    assert parse_icon("home") == {"type": "home"}
    assert parse_icon("") == {"type": "fire"}
    assert parse_icon(None) == {"type": "fire"}
