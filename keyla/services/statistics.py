import logging
import time
from typing import List

from keyla.errors import ProfileNotFound, ValidationError
from keyla.records import TestStatistics
from keyla.socketio_events import notify_profile

logger = logging.getLogger(__name__)


def _number(data, field):
    value = data.get(field)
    if not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0:
        raise ValidationError(field, 'must be a non-negative number')
    return float(value)


class StatisticsService:
    def __init__(self, repository, profile_repository):
        self.repository = repository
        self.profile_repository = profile_repository

    def save(self, data: dict) -> TestStatistics:
        for field in ('testId', 'profileId'):
            if not isinstance(data.get(field), str) or not data[field]:
                raise ValidationError(field, 'is required')
        wpm = _number(data, 'wpm')
        accuracy = _number(data, 'accuracy')
        if accuracy > 100:
            raise ValidationError('accuracy', 'must be a percentage between 0 and 100')
        errors = data.get('errors') or []
        if not isinstance(errors, list) or not all(isinstance(e, int) and not isinstance(e, bool) for e in errors):
            raise ValidationError('errors', 'must be a list of integers')
        timestamp = data.get('timestamp')
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        elif not isinstance(timestamp, int) or isinstance(timestamp, bool):
            raise ValidationError('timestamp', 'must be epoch milliseconds')

        if not self.profile_repository.get(data['profileId']):
            raise ProfileNotFound(data['profileId'])

        saved = self.repository.save(TestStatistics(
            test_id=data['testId'],
            profile_id=data['profileId'],
            wpm=wpm,
            accuracy=accuracy,
            errors=list(errors),
            timestamp=timestamp,
        ))
        logger.info(f"[stats-save] test={saved.test_id} profile={saved.profile_id} wpm={saved.wpm}")
        notify_profile(saved.profile_id, 'statistics_saved', saved.to_dict())
        return saved

    def list_by_profile(self, profile_id: str) -> List[TestStatistics]:
        return self.repository.list_by_profile(profile_id)
