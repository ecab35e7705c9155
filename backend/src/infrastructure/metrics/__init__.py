# src/infrastructure/metrics/__init__.py
from infrastructure.metrics.hit_counter import HitCounter
from infrastructure.metrics.hit_metrics import HitMetrics, NoopHitMetrics, PrometheusHitMetrics, make_hit_metrics

__all__ = [
    "HitCounter",
    "HitMetrics",
    "NoopHitMetrics",
    "PrometheusHitMetrics",
    "make_hit_metrics",
]
