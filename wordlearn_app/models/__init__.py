"""Database models package for wordlearn."""

from ..core.extensions import db

from .word import Word, WordPair

__all__ = [
    'db',
    'Word',
    'WordPair',
]
