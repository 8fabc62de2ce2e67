"""Profile, typing-test and statistics repositories.

Each store has an abstract contract, an in-memory implementation and a
SQLAlchemy-backed one; ``build_repositories`` picks the backend named by
the REPOSITORY_BACKEND setting.
"""

from .profiles import InMemoryProfileRepository, ProfileRepository, SqlProfileRepository
from .statistics import InMemoryStatisticsRepository, SqlStatisticsRepository, StatisticsRepository
from .typing_tests import InMemoryTypingTestRepository, SqlTypingTestRepository, TypingTestRepository

BACKENDS = {
    'memory': (InMemoryProfileRepository, InMemoryTypingTestRepository, InMemoryStatisticsRepository),
    'sql': (SqlProfileRepository, SqlTypingTestRepository, SqlStatisticsRepository),
}


def build_repositories(backend: str):
    try:
        classes = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown repository backend '{backend}', expected one of {sorted(BACKENDS)}")
    return tuple(cls() for cls in classes)


__all__ = [
    "ProfileRepository",
    "InMemoryProfileRepository",
    "SqlProfileRepository",
    "TypingTestRepository",
    "InMemoryTypingTestRepository",
    "SqlTypingTestRepository",
    "StatisticsRepository",
    "InMemoryStatisticsRepository",
    "SqlStatisticsRepository",
    "build_repositories",
]
