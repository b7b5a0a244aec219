"""Tests for POST /api/fetch-related-docs."""

import asyncio

import httpx
import pytest

from conftest import TEST_BASE_URL, TEST_TOKEN


def _doc(vc_id):
    return {
        "message": "ok",
        "did": f"did:example:{vc_id}",
        "document": {"title": vc_id, "vc_proof": {"credential_id": vc_id}},
    }


def _vc_id(request: httpx.Request) -> str:
    return request.url.path.rsplit("/", 1)[-1]


def test_returns_all_documents_in_input_order(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json=_doc(_vc_id(request)))

    response = client.post("/api/fetch-related-docs", json={"vcIds": ["a", "b", "c"]})

    assert response.status_code == 200
    assert response.json() == {"documents": [_doc("a"), _doc("b"), _doc("c")]}

    assert len(upstream.requests) == 3
    for request in upstream.requests:
        assert request.method == "GET"
        assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
    assert sorted(str(r.url) for r in upstream.requests) == [
        f"{TEST_BASE_URL}/vc/fetch/related/docs/{i}" for i in ("a", "b", "c")
    ]


def test_failed_ids_are_dropped_and_order_kept(client, upstream):
    def handler(request):
        vc_id = _vc_id(request)
        if vc_id == "missing":
            return httpx.Response(404, json={"error": "nope"})
        if vc_id == "broken":
            raise httpx.ReadError("reset by peer", request=request)
        if vc_id == "garbled":
            return httpx.Response(200, text="<<not json>>")
        return httpx.Response(200, json=_doc(vc_id))

    upstream.handler = handler

    response = client.post(
        "/api/fetch-related-docs",
        json={"vcIds": ["first", "missing", "second", "broken", "garbled", "third"]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "documents": [_doc("first"), _doc("second"), _doc("third")]
    }
    assert len(upstream.requests) == 6


def test_all_failures_yield_empty_list(client, upstream):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    upstream.handler = handler

    response = client.post("/api/fetch-related-docs", json={"vcIds": ["x", "y"]})

    assert response.status_code == 200
    assert response.json() == {"documents": []}


def test_order_follows_input_not_completion(client, upstream):
    delays = {"slow": 0.05, "medium": 0.02, "fast": 0.0}

    async def handler(request):
        vc_id = _vc_id(request)
        await asyncio.sleep(delays[vc_id])
        return httpx.Response(200, json=_doc(vc_id))

    upstream.handler = handler

    response = client.post(
        "/api/fetch-related-docs", json={"vcIds": ["slow", "medium", "fast"]}
    )

    assert [d["did"] for d in response.json()["documents"]] == [
        "did:example:slow",
        "did:example:medium",
        "did:example:fast",
    ]


def test_requests_are_dispatched_concurrently(client, upstream):
    ids = ["a", "b", "c", "d"]
    in_flight = []
    all_started = asyncio.Event()

    async def handler(request):
        in_flight.append(_vc_id(request))
        if len(in_flight) == len(ids):
            all_started.set()
        # A sequential loop would never get past the first request.
        await asyncio.wait_for(all_started.wait(), timeout=2)
        return httpx.Response(200, json=_doc(_vc_id(request)))

    upstream.handler = handler

    response = client.post("/api/fetch-related-docs", json={"vcIds": ids})

    assert response.status_code == 200
    assert len(response.json()["documents"]) == len(ids)


def test_ids_are_path_encoded(client, upstream):
    client.post("/api/fetch-related-docs", json={"vcIds": ["a/b c"]})

    assert upstream.requests[0].url.raw_path.endswith(b"/vc/fetch/related/docs/a%2Fb%20c")


@pytest.mark.parametrize(
    "payload",
    [{}, {"vcIds": []}, {"vcIds": None}, {"vcIds": "vc-1"}, {"vcIds": {"a": 1}}],
)
def test_invalid_ids(client, upstream, payload):
    response = client.post("/api/fetch-related-docs", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "No VC IDs provided"}
    assert upstream.requests == []


def test_missing_token(make_client, upstream):
    client = make_client(token=None)

    response = client.post("/api/fetch-related-docs", json={"vcIds": ["a"]})

    assert response.status_code == 500
    assert response.json() == {"error": "Service not configured"}
    assert upstream.requests == []
