import pytest

from entities import Asset, MissionStatus, Priority
from queries import (
    STATUS_FILTERS, filter_missions, fleet_summary, next_status_filter,
    sort_by_priority, status_breakdown
)
from seed import seed_assets, seed_missions


@pytest.fixture
def missions():
    return seed_missions()


def test_empty_query_and_all_returns_everything(missions):
    result = filter_missions(missions, "", "all")
    assert result == missions
    assert result is not missions


def test_nonexistent_query_returns_nothing(missions):
    assert filter_missions(missions, "nonexistent-xyz", "all") == []


def test_status_filter_active(missions):
    result = filter_missions(missions, "", "active")
    assert [m.mission_id for m in result] == ['M-001', 'M-002', 'M-005']
    assert all(m.status == MissionStatus.ACTIVE for m in result)


def test_query_matches_name_case_insensitively(missions):
    assert [m.mission_id for m in filter_missions(missions, "PHOENIX")] == ['M-001']
    assert [m.mission_id for m in filter_missions(missions, "ex")] == ['M-005']


def test_query_matches_id(missions):
    assert [m.mission_id for m in filter_missions(missions, "m-00")] == [
        'M-001', 'M-002', 'M-003', 'M-004', 'M-005'
    ]
    assert [m.mission_id for m in filter_missions(missions, "m-004")] == ['M-004']


def test_query_and_status_combine(missions):
    assert filter_missions(missions, "titan", "active") == []
    assert [m.mission_id for m in filter_missions(missions, "titan", "completed")] == ['M-003']


def test_status_filter_accepts_enum(missions):
    result = filter_missions(missions, status_filter=MissionStatus.STANDBY)
    assert [m.mission_id for m in result] == ['M-004']


def test_unknown_status_filter_matches_nothing(missions):
    assert filter_missions(missions, "", "archived") == []
    assert filter_missions(missions, "phoenix", "flying") == []
    assert filter_missions(missions, "", "") == []


def test_filter_on_empty_set():
    assert filter_missions([], "anything", "active") == []


def test_next_status_filter_cycles():
    seen = ['all']
    for _ in range(len(STATUS_FILTERS)):
        seen.append(next_status_filter(seen[-1]))
    assert seen[1] == 'active'
    assert seen[-1] == 'all'
    assert next_status_filter('bogus') == 'all'


def test_sort_by_priority(missions):
    ordered = sort_by_priority(missions)
    assert [m.mission_id for m in ordered] == ['M-001', 'M-005', 'M-002', 'M-004', 'M-003']
    assert ordered[0].priority == Priority.HIGH


def test_status_breakdown(missions):
    assert status_breakdown(missions) == {'active': 3, 'completed': 1, 'standby': 1}
    assert status_breakdown([]) == {}


def test_fleet_summary():
    summary = fleet_summary(seed_assets())
    assert summary['total_assets'] == 6
    assert summary['mean_battery'] == pytest.approx((67 + 82 + 34 + 100 + 45 + 0) / 6)
    assert summary['mean_signal'] == pytest.approx((95 + 88 + 100 + 100 + 92 + 0) / 6)
    assert summary['low_battery'] == ['UAV-14']
    assert summary['total_missions'] == 127 + 98 + 203 + 156 + 87 + 234


def test_fleet_summary_empty():
    summary = fleet_summary([])
    assert summary['total_assets'] == 0
    assert summary['low_battery'] == []


def test_fleet_summary_threshold_is_strict():
    assets = [Asset('UAV-1', 'Survey', 'active', battery=30, signal=90, missions=1)]
    assert fleet_summary(assets)['low_battery'] == []
