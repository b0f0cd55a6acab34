import os
import random
import sys
from contextlib import contextmanager

import pytest
from flask import template_rendered

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wordlearn_app import create_app, db
from wordlearn_app.config import Config
from wordlearn_app.models import Word
from wordlearn_app.modules.words.store import DatabaseWordStore


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    AUTO_SEED_WORDS = False
    LOG_DIR = None
    LOG_LEVEL = 'DEBUG'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_words(app):
    """Insert ``(polish, english)`` tuples and return the rows."""

    def _add(*pairs):
        words = [Word(polish=polish, english=english) for polish, english in pairs]
        db.session.add_all(words)
        db.session.commit()
        return words

    return _add


@contextmanager
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


class LastOffsetRandom(random.Random):
    def randrange(self, stop):
        return stop - 1


class ShrinkingWordStore(DatabaseWordStore):
    """Deletes rows right after its first count, keeping the first ``keep``."""

    def __init__(self, keep=0, **kwargs):
        super().__init__(**kwargs)
        self.keep = keep
        self.counts = 0

    def count(self):
        total = super().count()
        self.counts += 1
        if self.counts == 1:
            for word in Word.query.order_by(Word.word_id).offset(self.keep).all():
                db.session.delete(word)
            db.session.commit()
        return total
