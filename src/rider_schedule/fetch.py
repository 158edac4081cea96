"""HTTP GET with JSON/text auto-detection.

fetch_json() returns a tagged payload so callers must handle bodies that are
not JSON (the show API answers some errors with an HTML page and status 200).
"""

import json
from dataclasses import dataclass
from typing import Any

import httpx

from src.rider_schedule.errors import FetchError, MalformedResponseError
from src.rider_schedule.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Accept": "application/json, text/javascript, */*; q=0.01",
    "X-Requested-With": "XMLHttpRequest",
}


@dataclass(frozen=True)
class JsonPayload:
    """Response body decoded as JSON."""

    data: Any


@dataclass(frozen=True)
class TextPayload:
    """Response body that is not valid JSON, kept verbatim."""

    text: str


Payload = JsonPayload | TextPayload


def decode_body(text: str) -> Payload:
    try:
        return JsonPayload(json.loads(text))
    except ValueError:
        return TextPayload(text)


async def fetch_json(
    client: httpx.AsyncClient, url: str, *, timeout: float = DEFAULT_TIMEOUT
) -> Payload:
    """GET url and decode the body as JSON, falling back to raw text.

    Args:
        client: Shared httpx client.
        url: Absolute URL to fetch.
        timeout: Per-request timeout in seconds.

    Returns:
        JsonPayload if the body parses as JSON, otherwise TextPayload.

    Raises:
        FetchError: On transport failures, timeouts and non-2xx statuses.
    """
    log.debug("fetching", url=url)
    try:
        response = await client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"GET {url} returned HTTP {exc.response.status_code}", url=url
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"GET {url} failed: {exc!r}", url=url) from exc

    return decode_body(response.text)


def require_list(payload: Payload, key: str) -> list[dict[str, Any]]:
    """Extract the list of objects stored under a top-level key.

    Raises:
        MalformedResponseError: If the payload is text, lacks key, or key is not a list.
    """
    if isinstance(payload, TextPayload):
        raise MalformedResponseError(f"expected JSON with {key!r}, got text")
    data = payload.data
    if not isinstance(data, dict) or key not in data:
        raise MalformedResponseError(f"missing top-level key {key!r}")
    items = data[key]
    if not isinstance(items, list):
        raise MalformedResponseError(f"{key!r} is {type(items).__name__}, not a list")
    return [item for item in items if isinstance(item, dict)]


def expect_list(payload: Payload, key: str) -> list[dict[str, Any]]:
    """Like require_list(), but a malformed payload yields [] and a warning."""
    try:
        return require_list(payload, key)
    except MalformedResponseError as exc:
        log.warning("malformed_response", key=key, error=str(exc))
        return []
