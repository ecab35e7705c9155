# src/api/schemas/chirp.py
from typing import Optional

from pydantic import BaseModel, Field


class ChirpValidateRequest(BaseModel):
    body: Optional[str] = Field(default=None, description="Chirp text (missing or null reads as empty)")


class ChirpCleanedResponse(BaseModel):
    cleaned_body: str


class ErrorResponse(BaseModel):
    error: str
