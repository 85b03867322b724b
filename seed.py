"""Initial dashboard data: missions, assets, alerts, activity feed, and stats."""

from typing import Dict, List

from entities import (
    Mission, MissionStatus, Priority, Location,
    Asset, Alert, AlertKind, AlertSeverity,
    ActivityItem, ActivityType, Stats
)


def seed_missions() -> List[Mission]:
    return [
        Mission(
            mission_id='M-001', name='Phoenix Recon', status=MissionStatus.ACTIVE,
            progress=67.0, asset_id='UAV-7', priority=Priority.HIGH, eta='12m',
            location=Location(lat=6.5244, lng=3.3792),
            altitude=120.0, speed=45.0, battery=67.0,
        ),
        Mission(
            mission_id='M-002', name='Atlas Survey', status=MissionStatus.ACTIVE,
            progress=34.0, asset_id='UAV-3', priority=Priority.MEDIUM, eta='28m',
            location=Location(lat=6.4698, lng=3.5852),
            altitude=95.0, speed=38.0, battery=82.0,
        ),
        Mission(
            mission_id='M-003', name='Titan Delivery', status=MissionStatus.COMPLETED,
            progress=100.0, asset_id='UAV-12', priority=Priority.LOW, eta='0m',
            location=Location(lat=6.6018, lng=3.3515),
            altitude=0.0, speed=0.0, battery=34.0,
        ),
        Mission(
            mission_id='M-004', name='Orion Patrol', status=MissionStatus.STANDBY,
            progress=0.0, asset_id='UAV-5', priority=Priority.MEDIUM, eta='45m',
            location=Location(lat=6.4333, lng=3.4167),
            altitude=0.0, speed=0.0, battery=100.0,
        ),
        Mission(
            mission_id='M-005', name='Hermes Express', status=MissionStatus.ACTIVE,
            progress=89.0, asset_id='UAV-9', priority=Priority.HIGH, eta='6m',
            location=Location(lat=6.5355, lng=3.3087),
            altitude=110.0, speed=52.0, battery=45.0,
        ),
    ]


def seed_assets() -> List[Asset]:
    return [
        Asset('UAV-7', 'Reconnaissance', 'active', battery=67, signal=95, missions=127),
        Asset('UAV-3', 'Survey', 'active', battery=82, signal=88, missions=98),
        Asset('UAV-12', 'Delivery', 'charging', battery=34, signal=100, missions=203),
        Asset('UAV-5', 'Patrol', 'standby', battery=100, signal=100, missions=156),
        Asset('UAV-9', 'Express', 'active', battery=45, signal=92, missions=87),
        Asset('UAV-14', 'Cargo', 'maintenance', battery=0, signal=0, missions=234),
    ]


def seed_alerts() -> List[Alert]:
    return [
        Alert(1, AlertKind.WARNING, 'Low battery detected on UAV-7', '2m ago', AlertSeverity.MEDIUM),
        Alert(2, AlertKind.CRITICAL, 'Weather alert in Zone B', '5m ago', AlertSeverity.HIGH),
        Alert(3, AlertKind.INFO, 'Mission M-003 completed successfully', '8m ago', AlertSeverity.LOW),
    ]


def seed_activity_feed() -> List[ActivityItem]:
    return [
        ActivityItem(1, 'Mission M-001 entered Zone A', '1m ago', ActivityType.MISSION),
        ActivityItem(2, 'UAV-7 battery at 70%', '3m ago', ActivityType.ASSET),
        ActivityItem(3, 'New mission M-005 initiated', '7m ago', ActivityType.MISSION),
        ActivityItem(4, 'System health check completed', '10m ago', ActivityType.SYSTEM),
    ]


def seed_stats() -> Stats:
    return Stats(active_missions=3, total_assets=24, system_health=97.0, success_rate=94.2)


# Hourly mission volume and efficiency for the analytics panel
CHART_SERIES: List[Dict] = [
    {'time': '00:00', 'missions': 4, 'efficiency': 92},
    {'time': '04:00', 'missions': 2, 'efficiency': 95},
    {'time': '08:00', 'missions': 8, 'efficiency': 88},
    {'time': '12:00', 'missions': 12, 'efficiency': 91},
    {'time': '16:00', 'missions': 9, 'efficiency': 94},
    {'time': '20:00', 'missions': 6, 'efficiency': 96},
]
