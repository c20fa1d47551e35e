import io

import httpx
import pytest
from rich.console import Console


@pytest.fixture()
def capture_console():
    """Console writing plain text (no ANSI) into a buffer."""

    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=200)
    return console, buffer


@pytest.fixture()
def recorded_requests():
    return []


@pytest.fixture()
def make_transport(recorded_requests):
    """Build an `httpx.MockTransport` that records requests and replies with `response`."""

    def _factory(response=None, *, raise_exc=None):
        def _handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if raise_exc is not None:
                raise raise_exc(f"cannot reach {request.url.host}", request=request)
            return response if response is not None else httpx.Response(200, text="ok")

        return httpx.MockTransport(_handler)

    return _factory
