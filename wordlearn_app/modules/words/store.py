"""Word stores: where the learn views get their random words from.

Views never talk to the ``Word`` model directly. They ask the store installed
in ``app.extensions['word_store']`` (see :func:`get_word_store`), which keeps
tests free to swap in a :class:`FixedWordStore`.
"""

from __future__ import annotations

import logging
import random as _random
from typing import Iterable, Optional

from flask import current_app

from ...core.error_handlers import EmptyStoreError
from ...core.extensions import db
from ...models import Word, WordPair

logger = logging.getLogger(__name__)


class WordStore:
    """Interface shared by every store."""

    def random(self) -> WordPair:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class DatabaseWordStore(WordStore):
    """Picks words uniformly from the ``words`` table."""

    def __init__(self, rng: Optional[_random.Random] = None) -> None:
        self._rng = rng or _random.Random()

    def count(self) -> int:
        return db.session.query(Word).count()

    def random(self) -> WordPair:
        # Rows may be deleted between the count and the fetch; recount once.
        for _ in range(2):
            total = self.count()
            if total == 0:
                raise EmptyStoreError()

            offset = self._rng.randrange(total)
            word = (
                db.session.query(Word)
                .order_by(Word.word_id)
                .offset(offset)
                .limit(1)
                .first()
            )
            if word is not None:
                logger.debug("Picked word %s at offset %d of %d", word.word_id, offset, total)
                return word.to_pair()
            logger.info("Words table shrank below %d rows during pick, recounting.", total)

        raise EmptyStoreError()


class MemoryWordStore(WordStore):
    """Picks words uniformly from a fixed in-memory collection."""

    def __init__(self, pairs: Iterable[WordPair], rng: Optional[_random.Random] = None) -> None:
        self._pairs: tuple[WordPair, ...] = tuple(pairs)
        self._rng = rng or _random.Random()

    @property
    def pairs(self) -> tuple[WordPair, ...]:
        return self._pairs

    def count(self) -> int:
        return len(self._pairs)

    def random(self) -> WordPair:
        if not self._pairs:
            raise EmptyStoreError()
        return self._rng.choice(self._pairs)


class FixedWordStore(WordStore):
    """Always returns the same word; counts how often it was asked."""

    def __init__(self, word: WordPair) -> None:
        self.word = word
        self.calls = 0

    def count(self) -> int:
        # Reports its single word, not the words table; the nav count shows 1.
        return 1

    def random(self) -> WordPair:
        self.calls += 1
        return self.word


def get_word_store() -> WordStore:
    """Return the store installed on the current app."""
    return current_app.extensions['word_store']
