from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from keyla import db
from keyla.models import StatisticsRow
from keyla.records import TestStatistics


class StatisticsRepository:
    def save(self, statistics: TestStatistics) -> TestStatistics:
        raise NotImplementedError

    def get(self, test_id: str) -> Optional[TestStatistics]:
        raise NotImplementedError

    def list_by_profile(self, profile_id: str) -> List[TestStatistics]:
        raise NotImplementedError

    def delete_by_profile(self, profile_id: str) -> int:
        raise NotImplementedError

    def delete_all(self) -> bool:
        raise NotImplementedError


class InMemoryStatisticsRepository(StatisticsRepository):
    def __init__(self) -> None:
        self._stats: Dict[str, TestStatistics] = {}
        self._lock = threading.Lock()

    def save(self, statistics: TestStatistics) -> TestStatistics:
        with self._lock:
            saved = replace(statistics, errors=list(statistics.errors))
            self._stats[statistics.test_id] = saved
            return saved

    def get(self, test_id: str) -> Optional[TestStatistics]:
        return self._stats.get(test_id)

    def list_by_profile(self, profile_id: str) -> List[TestStatistics]:
        with self._lock:
            stats = [s for s in self._stats.values() if s.profile_id == profile_id]
        return sorted(stats, key=lambda s: s.timestamp)

    def delete_by_profile(self, profile_id: str) -> int:
        with self._lock:
            doomed = [k for k, s in self._stats.items() if s.profile_id == profile_id]
            for key in doomed:
                del self._stats[key]
            return len(doomed)

    def delete_all(self) -> bool:
        with self._lock:
            had_any = bool(self._stats)
            self._stats.clear()
            return had_any


def _to_statistics(row: StatisticsRow) -> TestStatistics:
    return TestStatistics(
        test_id=row.test_id,
        profile_id=row.profile_id,
        wpm=row.wpm,
        accuracy=row.accuracy,
        errors=list(row.errors or []),
        timestamp=row.timestamp,
    )


class SqlStatisticsRepository(StatisticsRepository):
    def save(self, statistics: TestStatistics) -> TestStatistics:
        row = db.session.get(StatisticsRow, statistics.test_id) or StatisticsRow(test_id=statistics.test_id)
        row.profile_id = statistics.profile_id
        row.wpm = statistics.wpm
        row.accuracy = statistics.accuracy
        row.errors = list(statistics.errors)
        row.timestamp = statistics.timestamp
        db.session.add(row)
        db.session.commit()
        return _to_statistics(row)

    def get(self, test_id: str) -> Optional[TestStatistics]:
        row = db.session.get(StatisticsRow, test_id)
        return _to_statistics(row) if row else None

    def list_by_profile(self, profile_id: str) -> List[TestStatistics]:
        rows = StatisticsRow.query.filter_by(profile_id=profile_id).order_by(StatisticsRow.timestamp).all()
        return [_to_statistics(row) for row in rows]

    def delete_by_profile(self, profile_id: str) -> int:
        deleted = StatisticsRow.query.filter_by(profile_id=profile_id).delete()
        db.session.commit()
        return deleted

    def delete_all(self) -> bool:
        deleted = StatisticsRow.query.delete()
        db.session.commit()
        return deleted > 0
