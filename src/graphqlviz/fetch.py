"""Fetch an introspection result over HTTP or copy it from a local file."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import requests
from graphql import get_introspection_query

from .config import FetchConfig

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the introspection result cannot be retrieved."""
    pass


def is_remote(locator: str) -> bool:
    return locator.startswith("http")


def introspection_query() -> dict[str, str]:
    """Request body for the standard introspection query."""
    return {"query": get_introspection_query(descriptions=True)}


def post_introspection(url: str, config: FetchConfig | None = None) -> dict[str, Any]:
    """POST the introspection query and return the decoded response body.

    Raises:
        FetchError: On connection failure, non-success status, a body that
            is not JSON, or GraphQL errors without data
    """
    config = config or FetchConfig()
    headers = {"content-type": "application/json", **config.headers}

    try:
        response = requests.post(url, json=introspection_query(), headers=headers, timeout=config.timeout)
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch schema from {url}: {e}") from e
    except ValueError as e:
        raise FetchError(f"Response from {url} is not JSON: {e}") from e

    if isinstance(body, dict) and body.get("errors") and not body.get("data"):
        raise FetchError(f"Introspection query returned errors: {body['errors']}")

    return body


def fetch_schema(locator: str, output_base: str | Path, config: FetchConfig | None = None) -> Path:
    """Persist the introspection result for ``locator`` to ``<output_base>.json``.

    URLs are queried with the introspection query and the response body is
    re-serialized; anything else is treated as a local file and copied
    unchanged. The cache file is only replaced once the content is complete.

    Returns:
        Path of the written JSON file
    """
    target = Path(f"{output_base}.json")

    if is_remote(locator):
        logger.info(f"Fetching schema from {locator}")
        content = json.dumps(post_introspection(locator, config)).encode("utf-8")
    else:
        logger.info(f"Loading schema from {locator}")
        content = Path(locator).read_bytes()

    _write_atomic(target, content)
    logger.debug(f"Wrote {len(content)} bytes to {target}")
    return target


def _write_atomic(target: Path, content: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, target)
    except BaseException:
        os.unlink(tmp_name)
        raise


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask
