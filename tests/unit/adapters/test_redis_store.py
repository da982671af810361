"""Unit tests for RedisRateLimitStore (client mocked, no server)."""
from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from roamease_realtime.adapters.redis import RedisRateLimitStore
from roamease_realtime.application.rate_limit import Quota, RateLimiter
from roamease_realtime.kernel.errors import RateLimitStoreError


def _client(increment_reply=None) -> tuple[MagicMock, AsyncMock, AsyncMock]:
    client = MagicMock()
    increment = AsyncMock(return_value=increment_reply if increment_reply is not None else [1, 1, 1_767_268_800_000])
    release = AsyncMock(return_value=1)
    client.register_script.side_effect = [increment, release]
    client.delete = AsyncMock(return_value=1)
    client.aclose = AsyncMock()
    return client, increment, release


class TestRedisRateLimitStore:
    def test_requires_url_or_client(self) -> None:
        with pytest.raises(ValueError):
            RedisRateLimitStore()

    def test_registers_both_scripts(self) -> None:
        client, _, _ = _client()
        RedisRateLimitStore(client=client)
        assert client.register_script.call_count == 2

    def test_increment_allowed(self) -> None:
        client, increment, _ = _client([1, 1, 1_767_268_800_000])
        state = asyncio.run(RedisRateLimitStore(client=client).increment("location_update:U1:S1", 1, 5))
        assert state.allowed is True
        assert state.count == 1
        assert state.window_start == 1_767_268_800.0
        assert state.window_end == 1_767_268_805.0
        increment.assert_awaited_once_with(keys=["rl:location_update:U1:S1"], args=[1, 5000])

    def test_increment_denied(self) -> None:
        client, _, _ = _client([0, 1, 1_767_268_800_000])
        state = asyncio.run(RedisRateLimitStore(client=client).increment("k", 1, 5))
        assert state.allowed is False
        assert state.count == 1

    def test_custom_prefix(self) -> None:
        client, increment, _ = _client()
        asyncio.run(RedisRateLimitStore(client=client, prefix="roamease").increment("k", 1, 5))
        assert increment.await_args.kwargs["keys"] == ["roamease:k"]

    def test_malformed_reply(self) -> None:
        client, _, _ = _client(["nope"])
        with pytest.raises(RateLimitStoreError):
            asyncio.run(RedisRateLimitStore(client=client).increment("k", 1, 5))

    def test_release_passes_window_start_in_ms(self) -> None:
        client, _, release = _client()
        asyncio.run(RedisRateLimitStore(client=client).release("k", 1_767_268_800.0))
        release.assert_awaited_once_with(keys=["rl:k"], args=[1_767_268_800_000])

    def test_reset_deletes_key(self) -> None:
        client, _, _ = _client()
        asyncio.run(RedisRateLimitStore(client=client).reset("k"))
        client.delete.assert_awaited_once_with("rl:k")

    def test_close(self) -> None:
        client, _, _ = _client()
        asyncio.run(RedisRateLimitStore(client=client).close())
        client.aclose.assert_awaited_once()

    def test_limiter_over_redis_store(self) -> None:
        client, _, release = _client([1, 1, 1_767_268_800_000])
        limiter = RateLimiter(RedisRateLimitStore(client=client), Quota("location_update", 1, 5))
        result = asyncio.run(limiter.check("U1:S1"))
        assert result.allowed is True
        assert result.key == "location_update:U1:S1"
        asyncio.run(limiter.release(result))
        release.assert_awaited_once_with(keys=["rl:location_update:U1:S1"], args=[1_767_268_800_000])
