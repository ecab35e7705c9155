import logging
from typing import Optional

from domain.chirp.types import MAX_CHIRP_LENGTH, ChirpTooLongError
from infrastructure.guardrails.profanity_masker import ProfanityMasker

logger = logging.getLogger(__name__)


class ChirpValidationService:
    def __init__(self, masker: Optional[ProfanityMasker] = None, max_length: int = MAX_CHIRP_LENGTH) -> None:
        self.masker = masker or ProfanityMasker()
        self.max_length = max_length

    def clean(self, body: str) -> str:
        """
        Length check first, then masking.
        Raises ChirpTooLongError when the body is over the limit.
        """
        if len(body) > self.max_length:
            logger.info("chirp rejected: length=%d limit=%d", len(body), self.max_length)
            raise ChirpTooLongError(len(body), self.max_length)
        return self.masker.mask_text(body)
