"""Request execution.

Sends exactly one request through the client handed in by the caller and
converts the httpx response into a `ResponseView`. The client is owned by the
caller (built once per invocation by `adapters.http_client`).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from core.domain.errors import RequestError, TransportError
from core.domain.models import (
    Command,
    GetCommand,
    KvPair,
    MediaType,
    PostCommand,
    ResponseView,
)

logger = logging.getLogger(__name__)


def build_request_body(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Map pairs to a JSON object body; a repeated key keeps its last value."""

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


def to_response_view(response: httpx.Response) -> ResponseView:
    """Snapshot a fully read httpx response."""

    headers = tuple(response.headers.multi_items())
    return ResponseView(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=headers,
        content_type=MediaType.parse(response.headers.get("content-type")),
        body=response.text,
    )


async def _send(client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> ResponseView:
    logger.debug("%s %s", method, url)
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.TransportError as exc:
        raise TransportError(url, exc) from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        # Redirect loops, URLs httpx refuses after syntax validation.
        raise RequestError(f"Request to {url} failed: {exc}") from exc

    logger.debug("%s %s -> %s", method, url, response.status_code)
    return to_response_view(response)


async def execute_get(client: httpx.AsyncClient, url: str) -> ResponseView:
    """GET `url` without a body."""

    return await _send(client, "GET", url)


async def execute_post(
    client: httpx.AsyncClient,
    url: str,
    pairs: Iterable[KvPair],
) -> ResponseView:
    """POST the pairs to `url` as a JSON object (`Content-Type: application/json`).

    Values are always sent as strings; see `build_request_body` for duplicates.
    """

    body = build_request_body(pairs)
    return await _send(client, "POST", url, json=body)


async def execute_command(client: httpx.AsyncClient, command: Command) -> ResponseView:
    """Run the request described by a parsed command.

    Why a dispatcher:
    - The CLI hands over the command as-is and never branches on the method.
    - Transport failures surface as `TransportError`; nothing is retried.
    """

    if isinstance(command, GetCommand):
        return await execute_get(client, command.url)
    if isinstance(command, PostCommand):
        return await execute_post(client, command.url, command.pairs)
    raise TypeError(f"Unsupported command: {command!r}")
