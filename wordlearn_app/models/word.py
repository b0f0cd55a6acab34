"""Vocabulary word model and its immutable value object."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.sql import func

from ..core.extensions import db


@dataclass(frozen=True)
class WordPair:
    """A Polish word and its English translation."""

    polish: str
    english: str

    def __post_init__(self) -> None:
        for field_name in ('polish', 'english'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"WordPair.{field_name} must be a non-empty string, got {value!r}")
            object.__setattr__(self, field_name, value.strip())

    def to_dict(self) -> dict[str, str]:
        return {'polish': self.polish, 'english': self.english}


class Word(db.Model):
    """A stored bilingual vocabulary entry."""

    __tablename__ = 'words'

    word_id = db.Column(db.Integer, primary_key=True)
    polish = db.Column(db.String(255), nullable=False)
    english = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    @classmethod
    def from_pair(cls, pair: WordPair) -> 'Word':
        return cls(polish=pair.polish, english=pair.english)

    def to_pair(self) -> WordPair:
        """Return an immutable copy safe to hand to views."""
        return WordPair(polish=self.polish, english=self.english)

    def __repr__(self) -> str:
        return f'<Word {self.word_id} {self.polish!r}={self.english!r}>'
