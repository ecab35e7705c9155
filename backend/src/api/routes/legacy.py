# api/routes/legacy.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from api.deps import get_hit_counter
from api.routes.health import health_check
from infrastructure.metrics import HitCounter

logger = logging.getLogger(__name__)

# Unprefixed aliases kept for older deployments. No chirp validation here.
router = APIRouter(tags=["legacy"])
router.add_api_route("/healthz", health_check, methods=["GET"], response_class=PlainTextResponse)


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics_text(counter: HitCounter = Depends(get_hit_counter)):
    return PlainTextResponse(f"Hits: {counter.load()}", status_code=200)


@router.post("/reset")
async def reset_metrics(counter: HitCounter = Depends(get_hit_counter)):
    previous = counter.reset()
    logger.info("file server hits reset via legacy route (was %d)", previous)
    return Response(status_code=200)
