from typing import Iterable, Optional

from domain.chirp.types import BANNED_WORDS, MASK_TOKEN


class ProfanityMasker:
    """
    Word-level masker.
    Splits on single spaces only; tokens carrying punctuation ("fornax!") are left alone.
    """

    def __init__(self, banned_words: Optional[Iterable[str]] = None, mask_token: str = MASK_TOKEN):
        words = BANNED_WORDS if banned_words is None else banned_words
        self.banned = frozenset(w.lower() for w in words)
        self.mask = mask_token

    def mask_text(self, text: str) -> str:
        tokens = text.split(" ")
        for i, token in enumerate(tokens):
            if token.lower() in self.banned:
                tokens[i] = self.mask
        return " ".join(tokens)


_default_masker = ProfanityMasker()


def sanitize(body: str, banned_words: Optional[Iterable[str]] = None, mask: str = MASK_TOKEN) -> str:
    masker = _default_masker
    if banned_words is not None or mask != MASK_TOKEN:
        masker = ProfanityMasker(banned_words, mask)
    return masker.mask_text(body)
