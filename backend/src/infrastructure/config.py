# src/infrastructure/config.py
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    # directory served under /app/
    static_root: str = "."
    # also mount /healthz, /metrics, /reset
    legacy_routes: bool = False
    # metrics backend: "noop" | "prom"
    metrics_backend: str = "noop"


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _bool_env(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.lower() in {"1", "true", "yes", "on"}


def load_server_config() -> ServerConfig:
    return ServerConfig(
        host=os.getenv("CHIRPY_HOST", "0.0.0.0"),
        port=_int_env("CHIRPY_PORT", 8080),
        static_root=os.getenv("CHIRPY_STATIC_ROOT", "."),
        legacy_routes=_bool_env("CHIRPY_LEGACY_ROUTES", False),
        metrics_backend=os.getenv("CHIRPY_METRICS", "noop").lower(),
    )
