# tests/api/test_responses.py

import json

from api.responses import respond_with_error, respond_with_json
from api.schemas.chirp import ChirpCleanedResponse


def test_respond_with_json_model():
    res = respond_with_json(200, ChirpCleanedResponse(cleaned_body="hi"))
    assert res.status_code == 200
    assert res.media_type == "application/json"
    assert json.loads(res.body) == {"cleaned_body": "hi"}


def test_respond_with_json_unencodable_payload():
    res = respond_with_json(200, {"value": float("nan")})
    assert res.status_code == 500
    payload = json.loads(res.body)
    assert payload["error"].startswith("Error marshaling response: ")


def test_respond_with_error():
    res = respond_with_error(400, "Chirp is too long")
    assert res.status_code == 400
    assert json.loads(res.body) == {"error": "Chirp is too long"}
