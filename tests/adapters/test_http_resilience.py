from __future__ import annotations

import asyncio

import httpx
from httpx_retries import Retry

from meshsync.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
    build_retry,
)


def test_build_retry_uses_policy_budget() -> None:
    retry = build_retry(RetryPolicy(total=5, backoff_factor=0.1))

    assert isinstance(retry, Retry)
    assert retry.total == 5
    assert retry.backoff_factor == 0.1


def test_resilient_client_applies_base_url_headers_and_timeout() -> None:
    client = ResilientClient(
        ResilienceConfig(
            name="control-plane",
            base_url="http://appmesh.test",
            timeout_seconds=4.0,
            default_headers={"Accept": "application/json"},
        )
    )
    inner = client._client  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    assert inner.base_url == httpx.URL("http://appmesh.test")
    assert inner.headers["Accept"] == "application/json"
    assert inner.timeout.read == 4.0
    asyncio.run(client.aclose())


def test_resilient_client_sends_through_rate_limiter() -> None:
    seen: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.method)
        return httpx.Response(204)

    async def run() -> list[int]:
        async with ResilientClient(
            ResilienceConfig(name="limited", ratelimit=RateLimit(max_calls=5, per_seconds=1.0))
        ) as client:
            client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
                base_url="http://appmesh.test", transport=httpx.MockTransport(handler)
            )
            responses = [
                await client.get("/routes"),
                await client.put("/routes", json={}),
                await client.delete("/routes/r1"),
            ]
            return [response.status_code for response in responses]

    assert asyncio.run(run()) == [204, 204, 204]
    assert seen == ["GET", "PUT", "DELETE"]
