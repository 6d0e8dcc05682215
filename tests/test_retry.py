import asyncio
import time

import httpx

from dashboard_client.clients.http_client import MAX_RETRIES_MESSAGE


def test_always_throttled_exhausts_after_ten_retries(client_for, sleeps):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(429)

    client = client_for(handler, retry_delay=1.5)
    result = asyncio.run(client.call("get", "/organizations"))

    assert len(calls) == 11
    assert sleeps == [1.5] * 10
    assert sum(sleeps) == 15.0
    assert result.success is False
    assert result.status == 429
    assert result.errors == [MAX_RETRIES_MESSAGE]
    assert result.data is None


def test_total_wait_matches_default_delay(client_for):
    client = client_for(lambda request: httpx.Response(429), retry_delay=0.01)

    start = time.perf_counter()
    result = asyncio.run(client.call("get", "/organizations"))
    elapsed = time.perf_counter() - start

    assert result.status == 429
    assert elapsed >= 0.1


def test_retry_after_header_is_honoured(client_for, sleeps):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(429, headers={"retry-after": "2"})
        return httpx.Response(200, json={"ok": True})

    client = client_for(handler)
    result = asyncio.run(client.call("post", "/organizations", body={"name": "acme"}))

    assert sleeps == [2.0]
    assert result.success is True
    assert result.status == 200
    assert result.data == {"ok": True}
    assert [r.method for r in calls] == ["POST", "POST"]
    assert calls[0].content == calls[1].content


def test_invalid_retry_after_falls_back_to_default(client_for, sleeps):
    responses = iter([
        httpx.Response(429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}),
        httpx.Response(429, headers={"Retry-After": "-3"}),
        httpx.Response(200, json=[]),
    ])
    client = client_for(lambda request: next(responses), retry_delay=0.5)
    result = asyncio.run(client.call("get", "/organizations"))

    assert sleeps == [0.5, 0.5]
    assert result.success is True


def test_server_errors_are_not_retried(client_for, sleeps):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"errors": ["x"]})

    client = client_for(handler)
    result = asyncio.run(client.call("get", "/organizations"))

    assert len(calls) == 1
    assert sleeps == []
    assert result.success is False
    assert result.status == 500
    assert result.errors == ["x"]


def test_each_page_gets_its_own_retry_budget(client_for, sleeps):
    state = {"page1": 0, "page2": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        key = "page2" if "page" in request.url.params else "page1"
        state[key] += 1
        if state[key] <= 10:
            return httpx.Response(429)
        if key == "page1":
            return httpx.Response(
                200, json=[1], headers={"link": '<https://api.test.local/api/v1/items?page=2>; rel="next"'}
            )
        return httpx.Response(200, json=[2])

    client = client_for(handler, retry_delay=0)
    result = asyncio.run(client.call("get", "/items"))

    assert state == {"page1": 11, "page2": 11}
    assert len(sleeps) == 20
    assert result.success is True
    assert result.data == [1, 2]


def test_new_calls_start_with_a_fresh_counter(client_for, sleeps):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        # 8 throttles per logical call, then success
        if len(calls) % 9:
            return httpx.Response(429)
        return httpx.Response(200, json=[len(calls)])

    client = client_for(handler, retry_delay=0)

    async def _twice():
        first = await client.call("get", "/items")
        second = await client.call("get", "/items")
        return first, second

    first, second = asyncio.run(_twice())
    assert first.success and second.success
    assert first.data == [9]
    assert second.data == [18]


def test_backoff_does_not_block_other_calls(client_for):
    order = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/slow"):
            order.append("slow")
            if order.count("slow") == 1:
                return httpx.Response(429, headers={"Retry-After": "0"})
            return httpx.Response(200, json=["slow"])
        order.append("fast")
        return httpx.Response(200, json=["fast"])

    client = client_for(handler, retry_delay=0)

    async def _both():
        return await asyncio.gather(client.call("get", "/slow"), client.call("get", "/fast"))

    slow, fast = asyncio.run(_both())
    assert slow.data == ["slow"]
    assert fast.data == ["fast"]
    assert sorted(order) == ["fast", "slow", "slow"]
