# src/api/app.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CollectorRegistry

from api.middleware import HitCountingApp
from api.routes import admin_router, api_router, legacy_router
from api.state import ApiState
from infrastructure.config import ServerConfig, load_server_config
from infrastructure.metrics import make_hit_metrics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # === STARTUP ===
    config: ServerConfig = app.state.config
    logger.info(
        "chirpy starting: static_root=%s legacy_routes=%s metrics=%s",
        config.static_root,
        config.legacy_routes,
        config.metrics_backend,
    )

    yield

    # === SHUTDOWN ===
    logger.info("chirpy shutting down (hits=%d)", app.state.api.hit_counter.load())


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled exception: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "internal server error"})


def create_app(config: Optional[ServerConfig] = None, state: Optional[ApiState] = None) -> FastAPI:
    config = config or load_server_config()
    if state is None:
        registry = CollectorRegistry()
        state = ApiState(
            hit_metrics=make_hit_metrics(config.metrics_backend, registry=registry),
            metrics_registry=registry,
        )

    app = FastAPI(title="Chirpy", lifespan=lifespan)
    app.state.config = config
    app.state.api = state
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(admin_router)
    if config.legacy_routes:
        app.include_router(legacy_router)

    files = StaticFiles(directory=config.static_root, html=True)
    app.mount("/app", HitCountingApp(files, state.hit_counter, state.hit_metrics), name="app")
    return app
