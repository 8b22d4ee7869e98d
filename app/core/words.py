"""Secret word source."""

import logging
import random
from collections.abc import Sequence
from pathlib import Path

from .constants import FALLBACK_WORD, WORDS_FILE

logger = logging.getLogger(__name__)


class WordSource:
    """Supplies a random secret word from a word list.

    The list is either read from a file (one word per line) on every draw,
    or given directly as a sequence. A round must always be able to start,
    so any failure to produce a word yields ``FALLBACK_WORD`` instead.
    """

    def __init__(
        self,
        path: Path | str | None = WORDS_FILE,
        words: Sequence[str] | None = None,
        rng: random.Random | None = None,
    ):
        self.path = Path(path) if path is not None else None
        self.words = list(words) if words is not None else None
        self.rng = rng or random.Random()

    def _load(self) -> list[str]:
        if self.words is not None:
            lines = self.words
        elif self.path is not None:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        else:
            lines = []
        return [line.strip() for line in lines if line.strip()]

    def next_word(self) -> str:
        """Pick a word uniformly at random among the non-blank entries."""
        try:
            words = self._load()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read word list %s: %s", self.path, e)
            return FALLBACK_WORD

        if not words:
            logger.warning("Word list %s is empty", self.path)
            return FALLBACK_WORD

        return self.rng.choice(words)
