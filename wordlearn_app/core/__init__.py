"""Core helpers for wiring application components together."""

from .error_handlers import EmptyStoreError, FixtureError, WordlearnError
from .extensions import csrf_protect, db

__all__ = [
    "EmptyStoreError",
    "FixtureError",
    "WordlearnError",
    "csrf_protect",
    "db",
]
