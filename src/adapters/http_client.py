"""httpx wrapper.

Why a builder:
- One place decides headers and redirect policy for the single client of an
  invocation.
- Tests pass a `httpx.MockTransport` through `transport=` (or monkeypatch the
  builder) so no network is touched.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the `httpx.AsyncClient` used for the request.

    Redirects are followed (httpx limit). No timeout is configured, so the
    httpx default applies.
    """

    settings = settings or AppSettings()
    kwargs: dict[str, object] = {
        "headers": {"User-Agent": settings.user_agent},
        "follow_redirects": True,
    }
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]
