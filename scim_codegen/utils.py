"""Loading of schema documents from disk or over HTTP.

A schema document is a JSON object; anything else is rejected here, before
the registry or the generator sees it.
"""

import json
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_MEDIA_TYPES = ("application/json", "application/scim+json")


class JSONLoaderError(Exception):
    """Raised when a schema document cannot be loaded."""

    pass


def _require_object(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise JSONLoaderError(
            f"Schema document in {source} must be a JSON object, "
            f"got {type(data).__name__}"
        )
    return data


def read_schema_file(file_path: str | Path) -> Dict[str, Any]:
    """Read a schema document from a local JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        JSONLoaderError: If the file is unreadable, not JSON, or not an object.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise JSONLoaderError(
            f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Cannot read {path}: {e}") from e

    logger.debug("Read schema document from %s", path)
    return _require_object(data, str(path))


def fetch_schema(url: str, timeout: int = 30) -> Dict[str, Any]:
    """Fetch a schema document, e.g. from a SCIM ``/Schemas/{id}`` endpoint.

    Raises:
        JSONLoaderError: If the URL is malformed, the request fails, or the
            response is not a JSON object.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(
            url, timeout=timeout, headers={"Accept": ", ".join(SCHEMA_MEDIA_TYPES)}
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise JSONLoaderError(f"Response from {url} is not valid JSON") from e
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout after {timeout}s for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.warning("Fetching %s failed: %s", url, e)
        raise JSONLoaderError(f"Cannot fetch {url}: {e}") from e

    content_type = response.headers.get("content-type", "").split(";")[0].strip()
    if content_type and content_type.lower() not in SCHEMA_MEDIA_TYPES:
        logger.warning("Unexpected content type %r from %s", content_type, url)

    logger.debug("Fetched schema document from %s", url)
    return _require_object(data, url)


def load_schema_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> Dict[str, Any]:
    """Load a schema document from exactly one of a file or a URL."""
    if (file_path is None) == (url is None):
        raise JSONLoaderError("Exactly one of file_path or url must be given")

    if url is not None:
        return fetch_schema(url, timeout)
    return read_schema_file(file_path)
