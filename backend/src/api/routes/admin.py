# api/routes/admin.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from api.deps import get_hit_counter
from infrastructure.metrics import HitCounter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_PAGE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
async def metrics_page(counter: HitCounter = Depends(get_hit_counter)):
    return HTMLResponse(METRICS_PAGE.format(hits=counter.load()), status_code=200)


@router.post("/reset")
async def reset_metrics(counter: HitCounter = Depends(get_hit_counter)):
    previous = counter.reset()
    logger.info("file server hits reset (was %d)", previous)
    return Response(status_code=200)
