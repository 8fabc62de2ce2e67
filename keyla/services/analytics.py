from typing import Iterable

from keyla.records import TestStatistics


def analyze_user(statistics: Iterable[TestStatistics], user_id: str) -> dict:
    """Summarize a user's saved statistics.

    Improvements compare the latest entry against the earliest one by
    timestamp, so a negative value means the user got worse.
    """
    stats = sorted(statistics, key=lambda s: s.timestamp)
    if not stats:
        return {
            'userId': user_id,
            'totalTests': 0,
            'averageWpm': 0.0,
            'averageAccuracy': 0.0,
            'bestWpm': 0.0,
            'worstWpm': 0.0,
            'bestAccuracy': 0.0,
            'worstAccuracy': 0.0,
            'wpmImprovement': 0.0,
            'accuracyImprovement': 0.0,
            'totalErrors': 0,
            'averageErrorsPerTest': 0.0,
        }

    total = len(stats)
    wpms = [s.wpm for s in stats]
    accuracies = [s.accuracy for s in stats]
    total_errors = sum(len(s.errors) for s in stats)
    return {
        'userId': user_id,
        'totalTests': total,
        'averageWpm': sum(wpms) / total,
        'averageAccuracy': sum(accuracies) / total,
        'bestWpm': max(wpms),
        'worstWpm': min(wpms),
        'bestAccuracy': max(accuracies),
        'worstAccuracy': min(accuracies),
        'wpmImprovement': wpms[-1] - wpms[0],
        'accuracyImprovement': accuracies[-1] - accuracies[0],
        'totalErrors': total_errors,
        'averageErrorsPerTest': total_errors / total,
    }


class AnalyticsService:
    def __init__(self, statistics_service):
        self.statistics_service = statistics_service

    def user_analytics(self, profile_id: str) -> dict:
        return analyze_user(self.statistics_service.list_by_profile(profile_id), profile_id)
