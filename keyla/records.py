"""Plain records passed between services and repositories."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import List, Optional, Set

from .words import TestDefinition


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class Profile:
    name: str
    email: str
    settings: Set[str] = field(default_factory=set)
    id: Optional[str] = None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'settings': sorted(self.settings),
        }


@dataclass
class PersistedTypingTest:
    profile_id: str
    definition: TestDefinition
    language: str
    sources: List[dict] = field(default_factory=list)  # [{'name': ..., 'merger': ...}]
    created_at: datetime = field(default_factory=utcnow)
    time_limit: Optional[int] = None
    id: Optional[str] = None
    completed_at: Optional[datetime] = None
    accuracy: Optional[float] = None
    raw_accuracy: Optional[float] = None
    test_time: Optional[int] = None
    error_count: Optional[int] = None
    error_word_indices: Optional[List[int]] = None

    @property
    def word_count(self) -> int:
        return len(self.definition.words)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def copy(self, **changes) -> "PersistedTypingTest":
        return replace(self, **changes)

    def to_dict(self):
        return {
            'testId': self.id,
            'profileId': self.profile_id,
            'words': list(self.definition.words),
            'sources': list(self.sources),
            'modifiers': list(self.definition.modifier_names),
            'language': self.language,
            'wordCount': self.word_count,
            'createdAt': isoformat(self.created_at),
            'timeLimit': self.time_limit,
            'completedAt': isoformat(self.completed_at),
            'accuracy': self.accuracy,
            'rawAccuracy': self.raw_accuracy,
            'testTime': self.test_time,
            'errorCount': self.error_count,
            'errorWordIndices': self.error_word_indices,
        }


@dataclass
class TestStatistics:
    test_id: str
    profile_id: str
    wpm: float
    accuracy: float
    errors: List[int] = field(default_factory=list)
    timestamp: int = 0

    __test__ = False

    def to_dict(self):
        return {
            'testId': self.test_id,
            'profileId': self.profile_id,
            'wpm': self.wpm,
            'accuracy': self.accuracy,
            'errors': list(self.errors),
            'timestamp': self.timestamp,
        }
