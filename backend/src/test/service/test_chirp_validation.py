# tests/service/test_chirp_validation.py

import pytest

from domain.chirp.types import ChirpTooLongError
from infrastructure.guardrails.profanity_masker import ProfanityMasker
from service.chirp_validation import ChirpValidationService


def test_clean_masks_profanity():
    svc = ChirpValidationService()
    assert svc.clean("This is a kerfuffle opinion") == "This is a **** opinion"


def test_clean_accepts_exactly_max_length():
    svc = ChirpValidationService()
    body = "a" * 140
    assert svc.clean(body) == body


def test_clean_rejects_over_max_length():
    svc = ChirpValidationService()
    with pytest.raises(ChirpTooLongError) as exc_info:
        svc.clean("a" * 141)
    assert str(exc_info.value) == "Chirp is too long"
    assert exc_info.value.length == 141


def test_length_is_checked_before_masking():
    # "kerfuffle" would mask down to 4 chars; the raw length is what counts
    svc = ChirpValidationService(masker=ProfanityMasker(), max_length=8)
    with pytest.raises(ChirpTooLongError):
        svc.clean("kerfuffle")
