"""Download Filenames: resolving a filename from response headers.

Invariants:
    - An explicit `filename` header wins over Content-Disposition
    - Quoted and bare `filename=` forms are both accepted
    - Result is percent-decoded; None when nothing can be resolved
"""

import re
from typing import Mapping
from urllib.parse import unquote

_QUOTED = re.compile(r'filename="([^"]*)"', re.IGNORECASE)
_BARE = re.compile(r"filename=([^;]*)", re.IGNORECASE)


def filename_from_headers(headers: Mapping[str, str]) -> str | None:
    filename = headers.get("filename")
    if not filename:
        disposition = headers.get("content-disposition") or ""
        match = _QUOTED.search(disposition) or _BARE.search(disposition)
        if match:
            filename = match.group(1).strip().strip('"')
    if not filename:
        return None
    return unquote(filename)
