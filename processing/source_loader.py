"""
Source loader — fetches the raw workbook bytes.

Locations starting with http:// or https:// are downloaded with requests;
anything else is read from the local filesystem. A single attempt is made;
failures surface as RetrievalError and the ingestor is never called.

Public API:
    fetch_workbook_bytes(location, timeout) → bytes
"""

import logging
from pathlib import Path

import requests

from config.settings import REQUEST_TIMEOUT_SECONDS
from processing.errors import RetrievalError

logger = logging.getLogger(__name__)

_REMOTE_PREFIXES: tuple[str, ...] = ("http://", "https://")


def fetch_workbook_bytes(
    location: str,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> bytes:
    """
    Return the raw bytes of the workbook at *location*.

    Args:
        location: Local file path or http(s) URL.
        timeout: Seconds to wait for a remote response.

    Returns:
        The file contents.

    Raises:
        RetrievalError: If the file cannot be read or the server does not
            answer with a success status.
    """
    if location.lower().startswith(_REMOTE_PREFIXES):
        return _fetch_remote(location, timeout)
    return _read_local(Path(location))


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _fetch_remote(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        error_message = f"Could not load file: {url}"
        logger.error(f"{error_message} ({exc})")
        raise RetrievalError(error_message) from exc

    logger.info(f"Downloaded {len(response.content)} bytes from '{url}'")
    return response.content


def _read_local(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as exc:
        error_message = f"Could not load file: {path}"
        logger.error(f"{error_message} ({exc})")
        raise RetrievalError(error_message) from exc

    logger.info(f"Read {len(data)} bytes from '{path}'")
    return data
