import logging
from typing import Callable, List, Optional

from config import TUNABLE_DEFAULTS, read_tunables
from keyla.errors import ConfigKeyNotFound, InvalidConfigValue

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    'DEFAULT_WORD_COUNT': 'Number of words in a test when the request does not give one',
    'MAX_WORD_COUNT': 'Largest word count a test may request',
    'DEFAULT_TIME_LIMIT_MS': 'Time limit in milliseconds used when the request does not give one',
    'LOG_LEVEL': 'Level of the application loggers',
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _data_type(value) -> str:
    return 'integer' if isinstance(value, int) else 'string'


class ConfigurationService:
    """Runtime view over the tunable keys of ``app.config``."""

    def __init__(self, flask_app, on_change: Optional[Callable[[], None]] = None):
        self.app = flask_app
        self.on_change = on_change

    def _entry(self, key: str) -> dict:
        default = TUNABLE_DEFAULTS[key]
        return {
            'key': key,
            'value': self.app.config[key],
            'description': DESCRIPTIONS[key],
            'dataType': _data_type(default),
            'defaultValue': default,
        }

    def list_entries(self) -> List[dict]:
        return [self._entry(key) for key in TUNABLE_DEFAULTS]

    def get_entry(self, key: str) -> dict:
        if key not in TUNABLE_DEFAULTS:
            raise ConfigKeyNotFound(key)
        return self._entry(key)

    def current(self) -> dict:
        return {key: self.app.config[key] for key in TUNABLE_DEFAULTS}

    def _validated(self, key: str, value):
        default = TUNABLE_DEFAULTS[key]
        if isinstance(default, int):
            if isinstance(value, str) and value.strip().isdigit():
                value = int(value.strip())
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigValue(key, value, 'must be an integer')
            if value <= 0:
                raise InvalidConfigValue(key, value, 'must be positive')
        else:
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                raise InvalidConfigValue(key, value, f"must be one of {', '.join(LOG_LEVELS)}")
            value = value.upper()
        return value

    def _check_word_counts(self, changes: dict) -> None:
        merged = {**self.current(), **changes}
        if merged['DEFAULT_WORD_COUNT'] > merged['MAX_WORD_COUNT']:
            key = 'DEFAULT_WORD_COUNT' if 'DEFAULT_WORD_COUNT' in changes else 'MAX_WORD_COUNT'
            raise InvalidConfigValue(key, merged[key], 'DEFAULT_WORD_COUNT cannot exceed MAX_WORD_COUNT')

    def update(self, key: str, value) -> dict:
        if key not in TUNABLE_DEFAULTS:
            raise ConfigKeyNotFound(key)
        value = self._validated(key, value)
        self._check_word_counts({key: value})
        self._apply({key: value})
        logger.info(f"[config] {key}={value}")
        return self._entry(key)

    def reload(self) -> dict:
        """Re-read the tunables from the environment."""
        try:
            values = read_tunables()
        except ValueError as exc:
            raise InvalidConfigValue('environment', None, str(exc))
        pending = {key: self._validated(key, value) for key, value in values.items()}
        self._check_word_counts(pending)
        self._apply(pending)
        self._changed()
        logger.info("[config] reloaded from environment")
        return self.current()

    def reset(self) -> dict:
        self._apply(dict(TUNABLE_DEFAULTS))
        self._changed()
        logger.info("[config] reset to defaults")
        return self.current()

    def _apply(self, values: dict) -> None:
        self.app.config.update(values)
        if 'LOG_LEVEL' in values:
            apply_log_level(self.app, values['LOG_LEVEL'])

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()


def apply_log_level(flask_app, level: str) -> None:
    flask_app.logger.setLevel(level)
    logging.getLogger('keyla').setLevel(level)
