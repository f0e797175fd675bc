"""Locale Bundles: loading flat key -> template mappings from JSON files."""

import json
import logging
from pathlib import Path

from envelope_client.core.errors import LocaleBundleError

logger = logging.getLogger(__name__)


def load_locale_messages(path: str | Path) -> dict[str, str]:
    """Read a translation bundle. Non-string values are rejected."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise LocaleBundleError(f"cannot read file ({e})", str(path)) from e
    except json.JSONDecodeError as e:
        raise LocaleBundleError(f"invalid JSON ({e})", str(path)) from e
    if not isinstance(data, dict):
        raise LocaleBundleError("top level must be an object", str(path))
    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise LocaleBundleError(f"non-string templates for {bad}", str(path))
    logger.info(f"Loaded {len(data)} locale messages from {path}")
    return data
