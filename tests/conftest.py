import json
import os
import sys
import pytest

# Ensure the repo root (containing the `keyla` package and config.py) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from keyla import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    REPOSITORY_BACKEND = 'sql'
    DICTIONARIES_DIR = os.path.join(REPO_ROOT, 'keyla', 'resources', 'dictionaries')
    DICTIONARY_EXTENSIONS = ['.txt', '.json']
    CORS_ORIGINS = ['http://localhost:5173']
    DEFAULT_WORD_COUNT = 50
    MAX_WORD_COUNT = 500
    DEFAULT_TIME_LIMIT_MS = 60000
    LOG_LEVEL = 'INFO'


@pytest.fixture()
def dictionaries_dir(tmp_path):
    """A small dictionary tree: english/{alpha,gamma,numbers}.txt, italian/{parole,broken}.json."""
    base = tmp_path / 'dictionaries'
    english = base / 'english'
    italian = base / 'italian'
    english.mkdir(parents=True)
    italian.mkdir()
    (english / 'alpha.txt').write_text('alpha\nbeta\n', encoding='utf-8')
    (english / 'gamma.txt').write_text(' gamma \n\n', encoding='utf-8')
    (english / 'numbers.txt').write_text('one\ntwo\nthree\nfour\nfive\nsix\n', encoding='utf-8')
    (italian / 'parole.json').write_text(
        json.dumps({'name': 'parole', 'words': ['ciao', 'casa', 'mare']}), encoding='utf-8'
    )
    (italian / 'broken.json').write_text('{"words": [', encoding='utf-8')
    return base


@pytest.fixture()
def flask_app(dictionaries_dir):
    class _Config(TestConfig):
        DICTIONARIES_DIR = str(dictionaries_dir)

    application = create_app(_Config)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def services(flask_app):
    return flask_app.extensions['keyla']


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def profile(client):
    res = client.post('/api/profiles', json={'name': 'Ada', 'email': 'ada@example.com'})
    assert res.status_code == 201
    return res.get_json()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
