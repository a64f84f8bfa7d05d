"""Transport tests."""

import httpx
import pytest

from dinetime.contracts import RawResponse, RequestDescriptor, SignedRequest
from dinetime.transports.httpx import HttpxTransport, request_target
from dinetime.transports.inmemory import InMemoryTransport, json_response


def _signed(descriptor):
    return SignedRequest(
        descriptor=descriptor,
        headers={"Authorization": "sig", "x-dinetime-timestamp": "ts"},
        timestamp="ts",
    )


@pytest.mark.asyncio
async def test_inmemory_transport_queue_then_handler():
    seen = []

    def handler(request):
        seen.append(request.descriptor.path)
        return RawResponse(status_code=202)

    transport = InMemoryTransport(handler)
    transport.queue_json({"a": 1}, status_code=201)

    first = await transport.dispatch(_signed(RequestDescriptor.build("GET", "/one")))
    second = await transport.dispatch(_signed(RequestDescriptor.build("GET", "/two")))

    assert first.status_code == 201
    assert first.json() == {"a": 1}
    assert second.status_code == 202
    assert seen == ["/two"]
    assert [r.descriptor.path for r in transport.sent] == ["/one", "/two"]
    assert transport.last_request.descriptor.path == "/two"


@pytest.mark.asyncio
async def test_inmemory_transport_async_handler_and_default():
    async def handler(request):
        return json_response({"ok": True})

    assert (await InMemoryTransport().dispatch(_signed(RequestDescriptor.build("GET", "/")))).status_code == 200
    response = await InMemoryTransport(handler).dispatch(_signed(RequestDescriptor.build("GET", "/")))
    assert response.json() == {"ok": True}


def test_request_target_uses_canonical_query_order():
    descriptor = RequestDescriptor.build("GET", "/Site/s1/Visits", {"stop": "b", "start": "a"})
    assert request_target(_signed(descriptor)) == "/Site/s1/Visits?start=a&stop=b"
    assert request_target(_signed(RequestDescriptor.build("GET", "/x"))) == "/x"


@pytest.mark.asyncio
async def test_httpx_transport_sends_signed_request():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["params"] = dict(request.url.params)
        captured["headers"] = request.headers
        captured["body"] = request.content
        return httpx.Response(404, json={"Message": "missing"})

    client = httpx.AsyncClient(
        base_url="https://api.test", transport=httpx.MockTransport(handler)
    )
    transport = HttpxTransport(base_url="https://api.test", client=client)
    descriptor = RequestDescriptor.build(
        "PATCH", "/Site/s1/WebAhead/v1", {"expand": "Guest"}, json_body={"PartySize": 3}
    )

    response = await transport.dispatch(_signed(descriptor))

    assert response.status_code == 404
    assert response.json() == {"Message": "missing"}
    assert captured["method"] == "PATCH"
    assert captured["path"] == "/Site/s1/WebAhead/v1"
    assert captured["params"] == {"expand": "Guest"}
    assert captured["headers"]["authorization"] == "sig"
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["body"] == b'{"PartySize":3}'

    # Clients passed in stay open; the caller owns them.
    await transport.disconnect()
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_httpx_transport_owns_lazily_created_client():
    transport = HttpxTransport(base_url="https://api.test")
    async with transport:
        assert transport._client is not None
    assert transport._client is None
