# api/routes/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["infra"])


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check():
    return PlainTextResponse("OK", status_code=200)
