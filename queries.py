"""Read-only projections of dashboard state for the view layer."""

from typing import Dict, List, Sequence, Union

import numpy as np

import config
from entities import Asset, Mission, MissionStatus, Priority


PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

STATUS_FILTERS = [config.STATUS_FILTER_ALL] + [s.value for s in MissionStatus]


def filter_missions(
    missions: Sequence[Mission],
    query: str = "",
    status_filter: Union[str, MissionStatus] = config.STATUS_FILTER_ALL
) -> List[Mission]:
    """
    Select the missions matching a search query and status filter.

    A mission matches when its name or ID contains ``query``
    (case-insensitive; an empty query matches everything) and its status
    equals ``status_filter`` (``"all"`` matches every status, an unknown
    status matches nothing). Relative order is preserved and the input is
    not modified.
    """
    if isinstance(status_filter, MissionStatus):
        status_filter = status_filter.value

    needle = query.lower()
    return [
        m for m in missions
        if (needle in m.name.lower() or needle in m.mission_id.lower())
        and (status_filter == config.STATUS_FILTER_ALL or m.status.value == status_filter)
    ]


def next_status_filter(current: str) -> str:
    """Cycle through "all" and each mission status."""
    index = STATUS_FILTERS.index(current) if current in STATUS_FILTERS else -1
    return STATUS_FILTERS[(index + 1) % len(STATUS_FILTERS)]


def sort_by_priority(missions: Sequence[Mission]) -> List[Mission]:
    """Order missions high priority first, then by ID."""
    return sorted(missions, key=lambda m: (PRIORITY_ORDER[m.priority], m.mission_id))


def status_breakdown(missions: Sequence[Mission]) -> Dict[str, int]:
    """Count missions per status, omitting statuses with no missions."""
    counts = {}
    for status in MissionStatus:
        count = len([m for m in missions if m.status == status])
        if count:
            counts[status.value] = count
    return counts


def fleet_summary(assets: Sequence[Asset]) -> Dict:
    """Aggregate figures for the asset inventory panel."""
    if not assets:
        return {
            'total_assets': 0,
            'mean_battery': 0.0,
            'mean_signal': 0.0,
            'low_battery': [],
            'total_missions': 0,
        }

    battery = np.array([a.battery for a in assets], dtype=float)
    signal = np.array([a.signal for a in assets], dtype=float)
    missions = np.array([a.missions for a in assets], dtype=int)
    low_mask = battery < config.LOW_BATTERY_THRESHOLD

    return {
        'total_assets': len(assets),
        'mean_battery': float(battery.mean()),
        'mean_signal': float(signal.mean()),
        'low_battery': [a.asset_id for a, low in zip(assets, low_mask) if low],
        'total_missions': int(missions.sum()),
    }
