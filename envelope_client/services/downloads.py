"""File Downloads: fetch a file and save it under its server-given name.

Invariants:
    - Bypasses the envelope contract: the body is the file
    - Explicit filename argument wins over response headers
    - Returns None (logged) when no filename can be resolved; nothing is written
    - Non-2xx responses are logged and return None
"""

import logging
from pathlib import Path
from typing import Any

from envelope_client.core.downloads import filename_from_headers
from envelope_client.core.request import Request
from envelope_client.infrastructure.transport import HttpTransport

logger = logging.getLogger(__name__)


async def download_file(
    transport: HttpTransport,
    url: str,
    filename: str | None = None,
    directory: str | Path = ".",
    **options: Any,
) -> Path | None:
    response = await transport.fetch(Request(url=url, headers={}, **options))
    if not response.is_success:
        logger.error(
            f"Download of {url} failed with HTTP {response.status_code}",
            extra={"url": url, "status_code": response.status_code},
        )
        return None

    filename = filename or filename_from_headers(response.headers)
    if not filename:
        logger.error(f"Could not resolve a filename for {url}", extra={"url": url})
        return None

    # Keep writes inside `directory`
    target = Path(directory) / Path(filename).name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(response.content)
    logger.info(f"Downloaded {url} to {target}", extra={"url": url})
    return target
