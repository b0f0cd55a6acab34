"""Loading word pairs from JSON fixture files."""

from __future__ import annotations

import json
import logging
from typing import Iterable, List

from ...core.error_handlers import FixtureError
from ...core.extensions import db
from ...models import Word, WordPair

logger = logging.getLogger(__name__)

# Short keys as used by older fixture files
_KEY_ALIASES = {'pl': 'polish', 'eng': 'english'}


def _normalize_entry(entry, index: int, path: str) -> WordPair:
    if not isinstance(entry, dict):
        raise FixtureError(f"Entry {index} is not an object", path=path, index=index)

    values = {}
    for key, value in entry.items():
        values[_KEY_ALIASES.get(key, key)] = value

    try:
        return WordPair(polish=values.get('polish'), english=values.get('english'))
    except ValueError as exc:
        raise FixtureError(f"Entry {index}: {exc}", path=path, index=index) from exc


def load_word_fixtures(path: str) -> List[WordPair]:
    """Read a JSON array of ``{"polish": ..., "english": ...}`` objects."""

    try:
        with open(path, encoding='utf-8') as fh:
            raw = json.load(fh)
    except OSError as exc:
        raise FixtureError(f"Cannot read fixture file: {exc}", path=path) from exc
    except json.JSONDecodeError as exc:
        raise FixtureError(f"Fixture file is not valid JSON: {exc}", path=path) from exc

    if not isinstance(raw, list):
        raise FixtureError("Fixture file must contain a JSON array", path=path)

    pairs = [_normalize_entry(entry, index, path) for index, entry in enumerate(raw)]
    logger.debug("Loaded %d word pairs from %s", len(pairs), path)
    return pairs


def seed_words(pairs: Iterable[WordPair], replace: bool = False) -> int:
    """Insert ``pairs`` into the words table and return how many were added."""

    if replace:
        deleted = db.session.query(Word).delete()
        logger.info("Removed %d existing words before seeding.", deleted)

    words = [Word.from_pair(pair) for pair in pairs]
    db.session.add_all(words)
    db.session.commit()
    return len(words)
