import asyncio
import json

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import RequestError, TransportError
from core.domain.models import GetCommand, KvPair, PostCommand
from core.services.request_executor import (
    build_request_body,
    execute_command,
    execute_get,
    execute_post,
)


def _run(transport, call):
    async def _go():
        async with build_async_client(AppSettings(), transport=transport) as client:
            return await call(client)

    return asyncio.run(_go())


def test_build_request_body_last_write_wins():
    pairs = [KvPair(key="a", value="1"), KvPair(key="b", value=""), KvPair(key="a", value="3")]
    assert build_request_body(pairs) == {"a": "3", "b": ""}


def test_execute_get_sends_no_body(make_transport, recorded_requests):
    transport = make_transport(httpx.Response(200, text="hello", headers={"Content-Type": "text/plain"}))

    view = _run(transport, lambda c: execute_get(c, "http://abc.xyz/path"))

    (request,) = recorded_requests
    assert request.method == "GET"
    assert str(request.url) == "http://abc.xyz/path"
    assert request.content == b""
    assert view.status_code == 200
    assert view.reason_phrase == "OK"
    assert view.body == "hello"
    assert view.content_type.essence == "text/plain"


def test_execute_post_sends_json_object(make_transport, recorded_requests):
    transport = make_transport(httpx.Response(201, json={"created": True}))
    pairs = [KvPair(key="a", value="1"), KvPair(key="b", value="2")]

    view = _run(transport, lambda c: execute_post(c, "https://httpbin.org/post", pairs))

    (request,) = recorded_requests
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"a": "1", "b": "2"}
    assert view.status_code == 201
    assert view.content_type.essence == "application/json"


def test_execute_post_without_pairs_sends_empty_object(make_transport, recorded_requests):
    _run(make_transport(), lambda c: execute_post(c, "http://abc.xyz", []))

    assert json.loads(recorded_requests[0].content) == {}


def test_execute_command_dispatches_on_variant(make_transport, recorded_requests):
    transport = make_transport()

    _run(transport, lambda c: execute_command(c, GetCommand(url="http://abc.xyz")))
    _run(transport, lambda c: execute_command(c, PostCommand(url="http://abc.xyz", pairs=())))

    assert [r.method for r in recorded_requests] == ["GET", "POST"]


def test_headers_keep_receipt_order_and_duplicates(make_transport):
    response = httpx.Response(
        200,
        headers=[("X-Second", "2"), ("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")],
        text="",
    )

    view = _run(make_transport(response), lambda c: execute_get(c, "http://abc.xyz"))

    names = [name for name, _ in view.headers]
    assert names[:3] == ["x-second", "set-cookie", "set-cookie"]
    assert ("set-cookie", "b=2") in view.headers


def test_user_agent_comes_from_settings(make_transport, recorded_requests):
    async def _go():
        settings = AppSettings(user_agent="probe/0.1")
        async with build_async_client(settings, transport=make_transport()) as client:
            await execute_get(client, "http://abc.xyz")

    asyncio.run(_go())

    assert recorded_requests[0].headers["user-agent"] == "probe/0.1"


def test_transport_failure_is_mapped(make_transport):
    transport = make_transport(raise_exc=httpx.ConnectError)

    with pytest.raises(TransportError) as info:
        _run(transport, lambda c: execute_get(c, "http://abc.xyz"))

    assert isinstance(info.value, RequestError)
    assert "cannot reach abc.xyz" in str(info.value)
    assert isinstance(info.value.cause, httpx.ConnectError)


def test_unsupported_scheme_is_a_transport_failure():
    async def _go():
        async with build_async_client(AppSettings()) as client:
            await execute_get(client, "ftp://abc.xyz/file")

    with pytest.raises(TransportError):
        asyncio.run(_go())
