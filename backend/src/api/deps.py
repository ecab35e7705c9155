# src/api/deps.py
from fastapi import Depends, Request

from api.state import ApiState
from infrastructure.metrics import HitCounter
from service.chirp_validation import ChirpValidationService


def get_api_state(request: Request) -> ApiState:
    return request.app.state.api


def get_hit_counter(state: ApiState = Depends(get_api_state)) -> HitCounter:
    return state.hit_counter


def get_chirp_service(state: ApiState = Depends(get_api_state)) -> ChirpValidationService:
    return state.chirps
