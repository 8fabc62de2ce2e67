import logging
import random
from typing import List

from keyla.errors import (
    DictionaryNotFound,
    InvalidMerger,
    InvalidModifier,
    ProfileNotFound,
    TestAlreadyCompleted,
    TestCreationFailed,
    TestNotFound,
    ValidationError,
)
from keyla.records import PersistedTypingTest, utcnow
from keyla.socketio_events import notify_profile
from keyla.words import (
    TestComposer,
    available_merge_strategies,
    available_modifiers,
    get_merge_strategy,
    get_modifier,
    is_valid_modifier,
)

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_sources(data: dict) -> List[dict]:
    """Normalize the requested sources to ``[{'name', 'merger'}]``.

    The first entry is the base source; every later entry needs a merger.
    A bare ``dictionaryName`` is accepted as a single base source.
    """
    raw = data.get('sources')
    if raw is None and data.get('dictionaryName'):
        raw = [{'name': data['dictionaryName']}]
    if not isinstance(raw, list) or not raw:
        raise ValidationError('sources', 'at least one source is required')

    parsed = []
    for index, entry in enumerate(raw):
        if isinstance(entry, str):
            entry = {'name': entry}
        if not isinstance(entry, dict) or not isinstance(entry.get('name'), str) or not entry['name']:
            raise ValidationError(f'sources[{index}].name', 'is required')
        merger = entry.get('merger') if index else None
        if index and not merger:
            raise ValidationError(f'sources[{index}].merger', 'is required for additional sources')
        if merger and (not isinstance(merger, str) or merger not in available_merge_strategies()):
            raise InvalidMerger(merger, available_merge_strategies())
        parsed.append({'name': entry['name'], 'merger': merger})
    return parsed


class TypingTestService:
    def __init__(self, profile_repository, test_repository, catalog_provider, word_loader, settings):
        self.profile_repository = profile_repository
        self.test_repository = test_repository
        self._catalog_provider = catalog_provider
        self.word_loader = word_loader
        self.settings = settings

    @property
    def catalog(self):
        return self._catalog_provider()

    # ------------------------------------------------------------------
    # Test lifecycle

    def request_test(self, data: dict) -> PersistedTypingTest:
        profile_id = data.get('profileId')
        if not isinstance(profile_id, str) or not profile_id:
            raise ValidationError('profileId', 'is required')
        sources = _parse_sources(data)

        modifier_names = data.get('modifiers') or []
        if not isinstance(modifier_names, list):
            raise ValidationError('modifiers', 'must be a list of modifier names')
        for name in modifier_names:
            if not isinstance(name, str) or not is_valid_modifier(name):
                raise InvalidModifier(name, available_modifiers())

        max_words = int(self.settings['MAX_WORD_COUNT'])
        word_count = data.get('wordCount', self.settings['DEFAULT_WORD_COUNT'])
        if not _is_int(word_count) or not 1 <= word_count <= max_words:
            raise ValidationError('wordCount', f'must be an integer between 1 and {max_words}')

        time_limit = data.get('timeLimit', self.settings['DEFAULT_TIME_LIMIT_MS'])
        if time_limit is not None and (not _is_int(time_limit) or time_limit <= 0):
            raise ValidationError('timeLimit', 'must be a positive number of milliseconds')

        seed = data.get('seed')
        if seed is not None and not _is_int(seed):
            raise ValidationError('seed', 'must be an integer')

        language = data.get('language')
        if not self.profile_repository.get(profile_id):
            raise ProfileNotFound(profile_id)

        word_sources = [self._resolve_source(entry['name'], language) for entry in sources]

        rng = random.Random(seed)
        composer = TestComposer(str).with_loader(self.word_loader).with_base_source(word_sources[0])
        for entry, source in zip(sources[1:], word_sources[1:]):
            composer.with_merged_source(get_merge_strategy(entry['merger'], rng=rng), source)
        for name in modifier_names:
            composer.with_modifier(get_modifier(name))
        try:
            definition = composer.build()
        except ValueError as exc:
            raise TestCreationFailed(str(exc))

        test = PersistedTypingTest(
            profile_id=profile_id,
            definition=definition.with_words(definition.words[:word_count]),
            language=language or word_sources[0].language,
            sources=sources,
            created_at=utcnow(),
            time_limit=time_limit,
        )
        # pending tests survive a failed build
        deleted = self.test_repository.delete_non_completed_by_profile(profile_id)
        if deleted:
            logger.info(f"[test-create] profile={profile_id} discarded {deleted} pending test(s)")
        saved = self.test_repository.create(test)
        logger.info(
            f"[test-create] test={saved.id} profile={profile_id} "
            f"sources={[s['name'] for s in sources]} words={saved.word_count}"
        )
        notify_profile(profile_id, 'test_created', {'testId': saved.id})
        return saved

    def get_completed_test(self, test_id: str) -> PersistedTypingTest:
        test = self.test_repository.get_completed(test_id)
        if not test:
            raise TestNotFound(test_id)
        return test

    def tests_by_profile(self, profile_id: str, language=None) -> List[PersistedTypingTest]:
        if language:
            tests = self.test_repository.by_profile_and_language(profile_id, language)
        else:
            tests = self.test_repository.by_profile(profile_id)
        return sorted(tests, key=lambda t: t.created_at)

    def tests_by_language(self, language: str) -> List[PersistedTypingTest]:
        return sorted(self.test_repository.by_language(language), key=lambda t: t.created_at)

    def last_test(self, profile_id: str) -> PersistedTypingTest:
        if not self.profile_repository.get(profile_id):
            raise ProfileNotFound(profile_id)
        test = self.test_repository.last_non_completed_by_profile(profile_id)
        if not test:
            raise TestNotFound(f'last non-completed test of {profile_id}')
        return test

    def submit_results(self, test_id: str, data: dict) -> PersistedTypingTest:
        for field in ('accuracy', 'rawAccuracy'):
            if not _is_number(data.get(field)) or not 0 <= data[field] <= 100:
                raise ValidationError(field, 'must be a percentage between 0 and 100')
        for field in ('testTime', 'errorCount'):
            if not _is_int(data.get(field)) or data[field] < 0:
                raise ValidationError(field, 'must be a non-negative integer')
        indices = data.get('errorWordIndices') or []
        if not isinstance(indices, list) or not all(_is_int(i) and i >= 0 for i in indices):
            raise ValidationError('errorWordIndices', 'must be a list of word positions')

        test = self.test_repository.get(test_id)
        if not test:
            raise TestNotFound(test_id)
        if test.is_completed:
            raise TestAlreadyCompleted(test_id)

        completed_at = utcnow()
        completed = test.copy(
            definition=test.definition.completed(completed_at),
            completed_at=completed_at,
            accuracy=float(data['accuracy']),
            raw_accuracy=float(data['rawAccuracy']),
            test_time=data['testTime'],
            error_count=data['errorCount'],
            error_word_indices=list(indices),
        )
        updated = self.test_repository.update(completed)
        if not updated:
            raise TestNotFound(test_id)
        logger.info(f"[test-complete] test={test_id} accuracy={updated.accuracy}")
        notify_profile(updated.profile_id, 'test_completed', {'testId': test_id, 'accuracy': updated.accuracy})
        return updated

    # ------------------------------------------------------------------
    # Catalog

    def _resolve_source(self, name: str, language=None):
        if language:
            source = self.catalog.source_by_language_and_name(language, name)
        else:
            source = self.catalog.source_by_name(name)
        if not source:
            raise DictionaryNotFound(name, language)
        return source

    def dictionaries(self, language=None):
        if language:
            return self.catalog.sources_by_language(language)
        return self.catalog.all_sources()

    def languages(self):
        return self.catalog.languages()

    def modifiers(self):
        return available_modifiers()

    def mergers(self):
        return available_merge_strategies()
