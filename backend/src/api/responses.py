# src/api/responses.py
import logging
from typing import Any, Dict

from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def respond_with_error(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": msg})


def respond_with_json(status_code: int, payload: Any) -> JSONResponse:
    """
    Encodes payload as a single JSON object.
    Encoding failures become a 500 error payload instead of propagating.
    """
    content: Dict[str, Any] = payload.model_dump() if isinstance(payload, BaseModel) else payload
    try:
        return JSONResponse(status_code=status_code, content=content)
    except (TypeError, ValueError) as e:
        logger.error("failed to encode response: %s", e)
        return respond_with_error(500, f"Error marshaling response: {e}")
