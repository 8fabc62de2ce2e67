import pytest

from keyla.records import TestStatistics
from keyla.services.analytics import analyze_user


def test_no_statistics_gives_zeros():
    result = analyze_user([], 'p1')
    assert result['userId'] == 'p1'
    assert result['totalTests'] == 0
    assert result['totalErrors'] == 0
    assert all(result[k] == 0.0 for k in ('averageWpm', 'bestWpm', 'wpmImprovement', 'averageErrorsPerTest'))


def test_summary_of_saved_statistics():
    stats = [
        TestStatistics('t3', 'p1', 45.0, 92.0, [], timestamp=3000),
        TestStatistics('t1', 'p1', 40.0, 90.0, [1, 2], timestamp=1000),
        TestStatistics('t2', 'p1', 65.0, 99.0, [5], timestamp=2000),
    ]
    result = analyze_user(stats, 'p1')
    assert result['totalTests'] == 3
    assert result['averageWpm'] == pytest.approx(50.0)
    assert result['averageAccuracy'] == pytest.approx(93.666, rel=1e-3)
    assert result['bestWpm'] == 65.0
    assert result['worstWpm'] == 40.0
    assert result['bestAccuracy'] == 99.0
    assert result['worstAccuracy'] == 90.0
    # latest minus earliest by timestamp
    assert result['wpmImprovement'] == pytest.approx(5.0)
    assert result['accuracyImprovement'] == pytest.approx(2.0)
    assert result['totalErrors'] == 3
    assert result['averageErrorsPerTest'] == pytest.approx(1.0)
