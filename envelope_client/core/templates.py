"""Template Rendering: `{{ name }}` substitution for locale messages.

Invariants:
    - Placeholders are identifiers only; whitespace inside braces is ignored
    - Missing context keys render as "" (no KeyError)
    - No escaping, no expressions, no nested lookups
"""

import re
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r"\{\{([\s\S]+?)\}\}")


def render_template(template: str, context: Mapping[str, Any]) -> str:
    def _substitute(match: re.Match) -> str:
        value = context.get(match.group(1).strip())
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_substitute, template)


def select_template(
    messages: Mapping[str, str] | None, key: str, default_message: str | None,
) -> str:
    """Installed template, else the default, else the key itself."""
    template = (messages or {}).get(key, default_message)
    return template or key
