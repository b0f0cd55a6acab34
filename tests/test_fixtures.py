import json

import pytest

from conftest import TestConfig
from wordlearn_app import create_app, db
from wordlearn_app.config import DEFAULT_FIXTURE_PATH
from wordlearn_app.core.error_handlers import FixtureError
from wordlearn_app.models import Word, WordPair
from wordlearn_app.modules.words.fixtures import load_word_fixtures, seed_words


def write_fixture(tmp_path, data, name='words.json'):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def test_default_fixture_is_small_and_contains_yes():
    pairs = load_word_fixtures(DEFAULT_FIXTURE_PATH)

    assert 4 <= len(pairs) <= 6
    assert WordPair(polish='tak', english='yes') in pairs


def test_short_keys_are_accepted(tmp_path):
    path = write_fixture(tmp_path, [{'pl': 'czesc', 'eng': 'hello'}, {'polish': 'nigdy', 'english': 'never'}])

    assert load_word_fixtures(path) == [
        WordPair(polish='czesc', english='hello'),
        WordPair(polish='nigdy', english='never'),
    ]


def test_blank_entry_is_rejected_with_its_index(tmp_path):
    path = write_fixture(tmp_path, [{'pl': 'tak', 'eng': 'yes'}, {'pl': 'nie', 'eng': ''}])

    with pytest.raises(FixtureError) as excinfo:
        load_word_fixtures(path)

    assert excinfo.value.details == {'path': path, 'index': 1}


@pytest.mark.parametrize('content', ['{"polish": "tak"}', '[1, 2]', 'not json'])
def test_malformed_fixture_files_are_rejected(tmp_path, content):
    path = tmp_path / 'broken.json'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(FixtureError):
        load_word_fixtures(str(path))


def test_missing_fixture_file(tmp_path):
    with pytest.raises(FixtureError) as excinfo:
        load_word_fixtures(str(tmp_path / 'missing.json'))

    assert excinfo.value.code == 'FIXTURE_ERROR'


def test_seed_words_appends_or_replaces(app, add_words):
    add_words(('stary', 'old'))

    assert seed_words([WordPair('tak', 'yes')]) == 1
    assert Word.query.count() == 2

    assert seed_words([WordPair('nie', 'no'), WordPair('tak', 'yes')], replace=True) == 2
    assert sorted(w.english for w in Word.query.all()) == ['no', 'yes']


def test_seed_words_command(app, tmp_path):
    path = write_fixture(tmp_path, [{'pl': 'tak', 'eng': 'yes'}, {'pl': 'nie', 'eng': 'no'}])

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code == 0
    assert 'Seeded 2 words' in result.output
    assert Word.query.count() == 2


def test_seed_words_command_uses_default_fixture(app):
    result = app.test_cli_runner().invoke(args=['seed-words'])

    assert result.exit_code == 0
    assert Word.query.count() == len(load_word_fixtures(DEFAULT_FIXTURE_PATH))


def test_empty_table_is_seeded_at_startup():
    class SeedingConfig(TestConfig):
        AUTO_SEED_WORDS = True

    seeded_app = create_app(SeedingConfig)
    with seeded_app.app_context():
        try:
            assert Word.query.count() == len(load_word_fixtures(DEFAULT_FIXTURE_PATH))
        finally:
            db.session.remove()
            db.drop_all()


def test_broken_fixture_fails_startup(tmp_path):
    class BrokenFixtureConfig(TestConfig):
        AUTO_SEED_WORDS = True
        WORDS_FIXTURE_PATH = str(tmp_path / 'missing.json')

    with pytest.raises(FixtureError):
        create_app(BrokenFixtureConfig)
