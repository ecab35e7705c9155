# src/api/state.py
from dataclasses import dataclass, field

from prometheus_client import CollectorRegistry

from infrastructure.metrics import HitCounter, HitMetrics, NoopHitMetrics
from service.chirp_validation import ChirpValidationService


@dataclass
class ApiState:
    """Per-app state handed to every route; one instance per create_app() call."""

    hit_counter: HitCounter = field(default_factory=HitCounter)
    hit_metrics: HitMetrics = field(default_factory=NoopHitMetrics)
    chirps: ChirpValidationService = field(default_factory=ChirpValidationService)
    # collectors of this app only; two apps in one process never share timeseries
    metrics_registry: CollectorRegistry = field(default_factory=CollectorRegistry)
