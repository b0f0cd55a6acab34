# File: wordlearn_app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# config.py lives in wordlearn_app/, so the project root is one level up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordlearn.db")

DEFAULT_FIXTURE_PATH = os.path.join(os.path.dirname(__file__), 'data', 'words.json')


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask configuration for the wordlearn app."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, set SECRET_KEY in production
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Seed the words table from WORDS_FIXTURE_PATH when it is empty at start-up
    AUTO_SEED_WORDS = _env_flag('AUTO_SEED_WORDS', True)
    WORDS_FIXTURE_PATH = os.environ.get('WORDS_FIXTURE_PATH') or DEFAULT_FIXTURE_PATH

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = _env_flag('LOG_JSON', False)

    WTF_CSRF_ENABLED = _env_flag('WTF_CSRF_ENABLED', True)

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if uri.startswith('sqlite:///') and uri != 'sqlite:///:memory:':
            os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
        log_dir = app.config.get('LOG_DIR')
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
