"""Typing-test domain services.

Routes and socket handlers call into these; the services own validation,
persistence and notifications, keeping HTTP concerns in the blueprints.
One ``Services`` container is built per application and stored on
``app.extensions['keyla']``.
"""

from flask import current_app

from keyla.repositories import build_repositories
from keyla.words import CachedDictionaryCatalog, FileDictionaryCatalog, default_loader

from .analytics import AnalyticsService
from .configuration import ConfigurationService
from .profiles import ProfileService
from .statistics import StatisticsService
from .typing_tests import TypingTestService


class Services:
    def __init__(self, flask_app):
        config = flask_app.config
        self.profile_repository, self.test_repository, self.statistics_repository = build_repositories(
            config['REPOSITORY_BACKEND']
        )
        # Shared by every composer in the process
        self.word_cache = default_loader(config['DICTIONARY_EXTENSIONS'])
        self.catalog = None
        self.refresh_dictionaries(config)

        self.profiles = ProfileService(self.profile_repository)
        self.typing_tests = TypingTestService(
            self.profile_repository, self.test_repository, lambda: self.catalog, self.word_cache, config
        )
        self.statistics = StatisticsService(self.statistics_repository, self.profile_repository)
        self.analytics = AnalyticsService(self.statistics)
        self.configuration = ConfigurationService(flask_app, on_change=lambda: self.refresh_dictionaries(config))

    def refresh_dictionaries(self, config) -> None:
        """Re-scan the dictionary directory and start a new word-cache lifetime."""
        self.catalog = CachedDictionaryCatalog(
            FileDictionaryCatalog(config['DICTIONARIES_DIR'], config['DICTIONARY_EXTENSIONS'])
        )
        self.word_cache.clear()


def get_services() -> Services:
    return current_app.extensions['keyla']


__all__ = [
    "Services",
    "get_services",
    "AnalyticsService",
    "ConfigurationService",
    "ProfileService",
    "StatisticsService",
    "TypingTestService",
]
