# src/infrastructure/metrics/hit_metrics.py
from abc import ABC, abstractmethod
from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter


class HitMetrics(ABC):
    @abstractmethod
    def observe_hit(self, method: str) -> None: ...


class NoopHitMetrics(HitMetrics):
    def observe_hit(self, method: str) -> None:  # pragma: no cover
        pass


class PrometheusHitMetrics(HitMetrics):
    # Mirrors the file server hits; unlike HitCounter it is never reset.
    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.hits = Counter(
            "chirpy_fileserver_hits_total",
            "Total requests served through the /app file server",
            ["method"],
            registry=registry if registry is not None else REGISTRY,
        )

    def observe_hit(self, method: str) -> None:
        self.hits.labels(method=method).inc()


def make_hit_metrics(backend: str, registry: Optional[CollectorRegistry] = None) -> HitMetrics:
    if backend == "prom":
        return PrometheusHitMetrics(registry=registry)
    return NoopHitMetrics()
