import os

# Settings that can be changed at runtime through /api/config
TUNABLE_DEFAULTS = {
    'DEFAULT_WORD_COUNT': 50,
    'MAX_WORD_COUNT': 500,
    'DEFAULT_TIME_LIMIT_MS': 60000,
    'LOG_LEVEL': 'INFO',
}


def read_tunables(environ=None):
    """Tunable settings with environment overrides applied."""
    environ = os.environ if environ is None else environ
    values = {}
    for key, default in TUNABLE_DEFAULTS.items():
        raw = environ.get(key)
        values[key] = default if raw is None else type(default)(raw)
    return values


_tunables = read_tunables()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///keyla.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # 'sql' (SQLAlchemy) or 'memory'
    REPOSITORY_BACKEND = os.environ.get('REPOSITORY_BACKEND', 'sql')
    DICTIONARIES_DIR = os.environ.get('DICTIONARIES_DIR') or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), 'keyla', 'resources', 'dictionaries'
    )
    DICTIONARY_EXTENSIONS = [e.strip() for e in os.environ.get('DICTIONARY_EXTENSIONS', '.txt,.json').split(',') if e.strip()]
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
        ).split(',') if o.strip()
    ]
    DEFAULT_WORD_COUNT = _tunables['DEFAULT_WORD_COUNT']
    MAX_WORD_COUNT = _tunables['MAX_WORD_COUNT']
    DEFAULT_TIME_LIMIT_MS = _tunables['DEFAULT_TIME_LIMIT_MS']
    LOG_LEVEL = _tunables['LOG_LEVEL']
