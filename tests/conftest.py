"""Test configuration helpers."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from entities import Location, Mission, MissionStatus, Priority, Stats  # noqa: E402
from scheduler import SimulatedClock  # noqa: E402


class ScriptedRandom:
    """Random source that replays fixed draws, then repeats ``fill``."""

    def __init__(self, values, fill=0.0):
        self.values = list(values)
        self.fill = fill
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.fill


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def clock():
    return SimulatedClock()


@pytest.fixture
def make_mission():
    def _make(mission_id='M-100', status=MissionStatus.ACTIVE, progress=50.0,
              battery=80.0, name='Test Flight', priority=Priority.MEDIUM):
        return Mission(
            mission_id=mission_id,
            name=name,
            status=status,
            progress=progress,
            asset_id='UAV-1',
            priority=priority,
            eta='10m',
            location=Location(lat=6.5, lng=3.4),
            altitude=100.0,
            speed=40.0,
            battery=battery,
        )
    return _make


@pytest.fixture
def stats():
    return Stats(active_missions=3, total_assets=24, system_health=97.0, success_rate=94.2)
