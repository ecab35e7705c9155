# tests/api/test_hit_counting.py

from unittest.mock import AsyncMock, MagicMock

import pytest

from api.middleware import HitCountingApp
from infrastructure.metrics import HitCounter


@pytest.mark.asyncio
async def test_counts_http_then_delegates():
    inner = AsyncMock()
    metrics = MagicMock()
    counter = HitCounter()
    app = HitCountingApp(inner, counter, metrics)

    scope = {"type": "http", "method": "HEAD", "path": "/index.html"}
    receive, send = AsyncMock(), AsyncMock()
    await app(scope, receive, send)

    assert counter.load() == 1
    metrics.observe_hit.assert_called_once_with("HEAD")
    inner.assert_awaited_once_with(scope, receive, send)


@pytest.mark.asyncio
async def test_counts_even_when_inner_app_fails():
    inner = AsyncMock(side_effect=RuntimeError("boom"))
    counter = HitCounter()
    app = HitCountingApp(inner, counter)

    with pytest.raises(RuntimeError):
        await app({"type": "http", "method": "GET"}, AsyncMock(), AsyncMock())
    assert counter.load() == 1


@pytest.mark.asyncio
async def test_non_http_scopes_are_not_counted():
    inner = AsyncMock()
    counter = HitCounter()
    app = HitCountingApp(inner, counter)

    await app({"type": "lifespan"}, AsyncMock(), AsyncMock())
    assert counter.load() == 0
    inner.assert_awaited_once()
