# src/domain/chirp/types.py
from typing import FrozenSet

BANNED_WORDS: FrozenSet[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK_TOKEN = "****"
MAX_CHIRP_LENGTH = 140


class ChirpTooLongError(ValueError):
    """Raised when a chirp body exceeds the allowed length."""

    message = "Chirp is too long"

    def __init__(self, length: int, limit: int = MAX_CHIRP_LENGTH):
        super().__init__(self.message)
        self.length = length
        self.limit = limit
