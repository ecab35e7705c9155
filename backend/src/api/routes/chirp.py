# api/routes/chirp.py
import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from api.deps import get_chirp_service
from api.responses import respond_with_error, respond_with_json
from api.schemas.chirp import ChirpCleanedResponse, ChirpValidateRequest, ErrorResponse
from domain.chirp.types import ChirpTooLongError
from service.chirp_validation import ChirpValidationService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["chirps"])


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


@router.post(
    "/validate_chirp",
    response_model=ChirpCleanedResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def validate_chirp(request: Request, chirps: ChirpValidationService = Depends(get_chirp_service)):
    """
    Decodes {"body": ...}, rejects chirps over the length limit (400)
    and answers {"cleaned_body": ...}. Undecodable payloads get a 500 error payload.
    """
    raw = await request.body()
    try:
        parsed = ChirpValidateRequest.model_validate_json(raw)
    except ValidationError as e:
        detail = _describe(e)
        logger.warning("undecodable chirp payload: %s", detail)
        return respond_with_error(500, f"Error decoding request: {detail}")

    try:
        cleaned = chirps.clean(parsed.body or "")
    except ChirpTooLongError as e:
        return respond_with_error(400, str(e))

    return respond_with_json(200, ChirpCleanedResponse(cleaned_body=cleaned))
