"""Icon strings: 'theme:type' or bare 'type' as used by menu definitions."""

DEFAULT_ICON_TYPE = "fire"


def parse_icon(icon: str | None) -> dict[str, str]:
    parsed: dict[str, str] = {}
    if icon:
        parts = icon.split(":")
        if len(parts) > 1:
            parsed["theme"] = parts[0]
            parsed["type"] = parts[1]
        else:
            parsed["type"] = parts[0]
    parsed["type"] = parsed.get("type") or DEFAULT_ICON_TYPE
    return parsed
