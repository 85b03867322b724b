"""Periodic telemetry simulation for the fleet dashboard.

Each tick advances in-flight missions, drifts the aggregate system health,
and occasionally appends a synthetic event to the activity feed. All
functions here are pure: they take the previous snapshot plus a random
source and return a new snapshot. The dashboard host owns the "current"
reference and replaces it after each tick.

Random draws go through ``rng``, any object with a ``random()`` method
returning floats in [0, 1) (``random.Random`` in production, scripted
sequences in tests). Draw order per tick is fixed:
    for each in-flight mission: progress step, battery drain
    health drift
    activity gate, then event text and category when the gate opens
"""

from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple

import config
from entities import (
    Mission, MissionStatus, Asset, Alert,
    ActivityItem, ActivityType, Stats,
    create_time_id
)


ACTIVITY_CATEGORIES = [ActivityType.MISSION, ActivityType.ASSET, ActivityType.SYSTEM]


@dataclass(frozen=True)
class DashboardState:
    """Immutable snapshot of everything the telemetry tick reads or writes."""
    missions: Tuple[Mission, ...]
    stats: Stats
    activity_feed: Tuple[ActivityItem, ...] = ()   # Newest first
    assets: Tuple[Asset, ...] = ()
    alerts: Tuple[Alert, ...] = ()


@dataclass
class TickResult:
    """Outcome of one tick: the new snapshot and what happened during it."""
    state: DashboardState
    completed: List[str] = field(default_factory=list)     # Mission IDs that crossed 100
    new_activity: Optional[ActivityItem] = None


def uniform(rng, low: float, high: float) -> float:
    """Draw from [low, high) using a single ``rng.random()`` call."""
    return low + (high - low) * rng.random()


def choose(rng, options: Sequence):
    """Pick one option uniformly using a single ``rng.random()`` call."""
    index = int(rng.random() * len(options))
    return options[min(index, len(options) - 1)]


# ========== Mission Progress & Completion ==========

def crossed_completion(progress_before: float, progress_after: float) -> bool:
    """
    Check if a progress update crosses into completion.

    Edge-triggered: only the update that moves progress from below 100 to
    100 or more counts. A mission already at 100 never crosses again.
    """
    return (progress_before < config.PROGRESS_COMPLETE
            and progress_after >= config.PROGRESS_COMPLETE)


def advance_mission(mission: Mission, rng) -> Mission:
    """
    Advance a single in-flight mission by one tick.

    Missions that are not active, or already complete, are returned as-is
    without consuming any random draws.
    """
    if not mission.is_in_flight():
        return mission

    step = uniform(rng, 0.0, config.PROGRESS_STEP_MAX)
    drain = uniform(rng, 0.0, config.BATTERY_DRAIN_MAX)

    progress = min(config.PROGRESS_COMPLETE, mission.progress + step)

    # Batteries that start under the floor are left alone rather than lifted to it
    if mission.battery > config.BATTERY_FLOOR:
        battery = max(config.BATTERY_FLOOR, mission.battery - drain)
    else:
        battery = mission.battery

    status = mission.status
    if progress >= config.PROGRESS_COMPLETE:
        status = MissionStatus.COMPLETED

    return replace(mission, progress=progress, battery=battery, status=status)


def advance_missions(
    missions: Sequence[Mission],
    rng,
    on_complete: Optional[Callable[[Mission], None]] = None
) -> Tuple[List[Mission], List[str]]:
    """
    Advance every in-flight mission by one tick.

    Args:
        missions: Current mission set
        rng: Random source
        on_complete: Called with the updated mission, inline and before the
            new set is returned, for each mission that crosses 100 this tick

    Returns:
        (new mission list in the same order, IDs of missions completed this tick)
    """
    updated = []
    completed = []

    for mission in missions:
        new_mission = advance_mission(mission, rng)

        if new_mission is not mission and crossed_completion(mission.progress, new_mission.progress):
            completed.append(mission.mission_id)
            if on_complete is not None:
                on_complete(new_mission)

        updated.append(new_mission)

    return updated, completed


# ========== System Health ==========

def drift_health(stats: Stats, rng) -> Stats:
    """Apply one bounded random-walk step to system health."""
    step = uniform(rng, -config.HEALTH_DRIFT, config.HEALTH_DRIFT)
    health = max(config.HEALTH_MIN, min(config.HEALTH_MAX, stats.system_health + step))
    return replace(stats, system_health=health)


# ========== Activity Feed ==========

def generate_activity(
    feed: Sequence[ActivityItem],
    rng,
    now: float
) -> Tuple[Tuple[ActivityItem, ...], Optional[ActivityItem]]:
    """
    Possibly prepend a synthetic event to the activity feed.

    Returns:
        (new feed, the new item or None if the gate stayed closed)
    """
    if rng.random() <= config.ACTIVITY_THRESHOLD:
        return tuple(feed), None

    last_id = max((item.item_id for item in feed), default=None)
    item = ActivityItem(
        item_id=create_time_id(now, last_id),
        event=choose(rng, config.ACTIVITY_EVENTS),
        time=config.ACTIVITY_JUST_NOW,
        category=choose(rng, ACTIVITY_CATEGORIES),
    )

    new_feed = (item,) + tuple(feed[:config.ACTIVITY_FEED_LIMIT - 1])
    return new_feed, item


# ========== Tick ==========

def run_tick(
    state: DashboardState,
    rng,
    now: float,
    on_complete: Optional[Callable[[Mission], None]] = None,
    debug: bool = False
) -> TickResult:
    """
    Compute the snapshot that follows ``state`` after one tick.

    Completion notifications are delivered through ``on_complete`` before
    this function returns, so they always precede the committed snapshot.
    """
    missions, completed = advance_missions(state.missions, rng, on_complete)
    stats = drift_health(state.stats, rng)
    feed, new_item = generate_activity(state.activity_feed, rng, now)

    for mission_id in completed:
        print(f"[Telemetry] Mission {mission_id} reached 100%")

    if debug:
        in_flight = len([m for m in missions if m.is_in_flight()])
        print(f"[Telemetry] Tick: {in_flight} in flight, "
              f"health {stats.system_health:.2f}%, feed {len(feed)}")
        if new_item:
            print(f"[Telemetry] Activity: {new_item.event} ({new_item.category.value})")

    new_state = replace(state, missions=tuple(missions), stats=stats, activity_feed=feed)
    return TickResult(state=new_state, completed=completed, new_activity=new_item)
