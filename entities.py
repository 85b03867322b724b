"""Core entity types for the fleet operations dashboard.

This module defines the records the dashboard renders and the telemetry
engine updates:
- Missions: in-flight, queued, or finished tasks flown by an asset
- Assets: the aerial vehicles in the inventory
- Alerts: operator-facing warnings (static)
- ActivityItems: entries of the newest-first activity feed
- Stats: aggregate fleet figures
- Toasts: transient, auto-expiring notifications

Records are immutable. Updates build a new record with ``dataclasses.replace``
so that each tick commits a fresh snapshot instead of mutating shared state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import config


class MissionStatus(Enum):
    """Lifecycle status of a mission."""
    ACTIVE = "active"
    COMPLETED = "completed"
    STANDBY = "standby"
    CHARGING = "charging"
    MAINTENANCE = "maintenance"


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AlertKind(Enum):
    WARNING = "warning"
    CRITICAL = "critical"
    INFO = "info"


class AlertSeverity(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActivityType(Enum):
    """Category of an activity feed entry."""
    MISSION = "mission"
    ASSET = "asset"
    SYSTEM = "system"


class ToastType(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(frozen=True)
class Mission:
    """
    A task flown by a single asset.

    Progress and battery only move while the mission is ACTIVE. Once progress
    reaches 100 the mission is COMPLETED and no longer simulated.
    """
    mission_id: str
    name: str
    status: MissionStatus
    progress: float             # 0-100
    asset_id: str
    priority: Priority
    eta: str                    # Display string, not simulated
    location: Location
    altitude: float             # meters
    speed: float                # km/h
    battery: float              # 0-100

    def is_in_flight(self) -> bool:
        """Check if the mission is still advanced by the simulator."""
        return self.status == MissionStatus.ACTIVE and self.progress < config.PROGRESS_COMPLETE

    def to_dict(self) -> dict:
        return {
            'mission_id': self.mission_id,
            'name': self.name,
            'status': self.status.value,
            'progress': self.progress,
            'asset_id': self.asset_id,
            'priority': self.priority.value,
            'eta': self.eta,
            'location': {'lat': self.location.lat, 'lng': self.location.lng},
            'altitude': self.altitude,
            'speed': self.speed,
            'battery': self.battery,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Mission':
        location = data.get('location', {})
        return cls(
            mission_id=data['mission_id'],
            name=data['name'],
            status=MissionStatus(data['status']),
            progress=float(data.get('progress', 0.0)),
            asset_id=data['asset_id'],
            priority=Priority(data.get('priority', 'medium')),
            eta=data.get('eta', ''),
            location=Location(lat=location.get('lat', 0.0), lng=location.get('lng', 0.0)),
            altitude=data.get('altitude', 0.0),
            speed=data.get('speed', 0.0),
            battery=float(data.get('battery', 100.0)),
        )


@dataclass(frozen=True)
class Asset:
    """An aerial vehicle in the inventory. Not simulated."""
    asset_id: str
    asset_type: str
    status: str
    battery: float
    signal: float
    missions: int   # Cumulative missions flown

    def to_dict(self) -> dict:
        return {
            'asset_id': self.asset_id,
            'asset_type': self.asset_type,
            'status': self.status,
            'battery': self.battery,
            'signal': self.signal,
            'missions': self.missions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Asset':
        return cls(
            asset_id=data['asset_id'],
            asset_type=data['asset_type'],
            status=data['status'],
            battery=data.get('battery', 0.0),
            signal=data.get('signal', 0.0),
            missions=data.get('missions', 0),
        )


@dataclass(frozen=True)
class Alert:
    alert_id: int
    kind: AlertKind
    message: str
    time: str
    severity: AlertSeverity

    def to_dict(self) -> dict:
        return {
            'alert_id': self.alert_id,
            'kind': self.kind.value,
            'message': self.message,
            'time': self.time,
            'severity': self.severity.value,
        }


@dataclass(frozen=True)
class ActivityItem:
    """One entry of the activity feed."""
    item_id: int
    event: str
    time: str       # Relative-time label, e.g. "Just now" or "3m ago"
    category: ActivityType

    def to_dict(self) -> dict:
        return {
            'item_id': self.item_id,
            'event': self.event,
            'time': self.time,
            'category': self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ActivityItem':
        return cls(
            item_id=data['item_id'],
            event=data['event'],
            time=data['time'],
            category=ActivityType(data['category']),
        )


@dataclass(frozen=True)
class Stats:
    """Aggregate fleet figures. Only system_health drifts per tick."""
    active_missions: int
    total_assets: int
    system_health: float    # Bounded to [HEALTH_MIN, HEALTH_MAX]
    success_rate: float

    def to_dict(self) -> dict:
        return {
            'active_missions': self.active_missions,
            'total_assets': self.total_assets,
            'system_health': self.system_health,
            'success_rate': self.success_rate,
        }


@dataclass(frozen=True)
class Toast:
    """A transient notification shown until dismissed or expired."""
    toast_id: int
    message: str
    toast_type: ToastType
    created_at: float       # Clock seconds
    expires_at: float       # Clock seconds

    def is_expired(self, now: float) -> bool:
        """Check if the toast has reached its removal time."""
        return now >= self.expires_at

    def to_dict(self) -> dict:
        return {
            'toast_id': self.toast_id,
            'message': self.message,
            'toast_type': self.toast_type.value,
            'created_at': self.created_at,
            'expires_at': self.expires_at,
        }


def create_time_id(now: float, last_id: Optional[int] = None) -> int:
    """
    Generate a creation-time based identifier.

    Uses the clock reading in milliseconds. If that would not be strictly
    greater than ``last_id`` (two records created within the same millisecond,
    or a clock that did not advance), the previous id is bumped by one so
    identifiers stay unique and increasing.
    """
    candidate = int(now * 1000)
    if last_id is not None and candidate <= last_id:
        return last_id + 1
    return candidate
