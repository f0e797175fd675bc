"""Locale Resolver: localized messages from the configured template map.

Invariants:
    - Lookup order: locale_messages[key], then default_message, then key
    - A non-empty context renders {{ name }} placeholders; the wrapper is not applied
    - Without context the template is returned as-is, through
      locale_message_wrapper when one is configured and wrap is true
"""

from typing import Any, Mapping

from envelope_client.config import ClientConfig
from envelope_client.core.templates import render_template, select_template


class LocaleResolver:

    def __init__(self, config: ClientConfig):
        self.config = config

    def resolve(
        self,
        key: str,
        default_message: str | None = None,
        context: Mapping[str, Any] | None = None,
        *,
        wrap: bool = True,
    ) -> Any:
        template = select_template(self.config.locale_messages, key, default_message)
        if context:
            return render_template(template, context)
        wrapper = self.config.locale_message_wrapper
        if wrap and wrapper is not None:
            return wrapper(template)
        return template

    # Short alias used throughout screen code: L("key", "Default")
    L = resolve

