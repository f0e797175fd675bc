"""Template tests: placeholder rendering and template selection."""

from envelope_client.core.templates import render_template, select_template


def test_render_substitutes_placeholders():
    assert render_template("Hello {{name}}", {"name": "Ann"}) == "Hello Ann"


def test_render_ignores_whitespace_inside_braces():
    assert render_template("{{ a }}-{{b }}", {"a": 1, "b": 2}) == "1-2"


def test_render_missing_key_is_empty():
    assert render_template("Hi {{ who }}!", {"other": "x"}) == "Hi !"


def test_render_does_not_escape():
    assert render_template("{{x}}", {"x": "<b>"}) == "<b>"


def test_select_prefers_installed_template():
    assert select_template({"k": "installed"}, "k", "default") == "installed"


def test_select_falls_back_to_default_then_key():
    assert select_template({}, "k", "default") == "default"
    assert select_template(None, "k", None) == "k"
    assert select_template({}, "k", "") == "k"
