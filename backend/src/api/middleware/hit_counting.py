# src/api/middleware/hit_counting.py
from typing import Optional

from starlette.types import ASGIApp, Receive, Scope, Send

from infrastructure.metrics import HitCounter, HitMetrics, NoopHitMetrics


class HitCountingApp:
    """
    ASGI wrapper around the static file app.
    Counts every http request before handing it on, whatever the wrapped app answers.
    """

    def __init__(self, app: ASGIApp, counter: HitCounter, metrics: Optional[HitMetrics] = None) -> None:
        self.app = app
        self.counter = counter
        self.metrics = metrics or NoopHitMetrics()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
            self.metrics.observe_hit(scope.get("method", "GET"))
        await self.app(scope, receive, send)
