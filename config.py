"""Configuration constants for the fleet operations dashboard."""

# Scheduler
TICK_INTERVAL = 3.0  # seconds between telemetry ticks
FRAME_INTERVAL = 0.1  # seconds between view refreshes / expiry polls

# Mission progress simulation
PROGRESS_STEP_MAX = 2.0  # percentage points, upper bound (exclusive) per tick
BATTERY_DRAIN_MAX = 0.5  # percentage points, upper bound (exclusive) per tick
BATTERY_FLOOR = 20.0  # simulated battery never drains below this
PROGRESS_COMPLETE = 100.0

# System health drift
HEALTH_MIN = 95.0
HEALTH_MAX = 99.0
HEALTH_DRIFT = 0.25  # half-width of the per-tick random walk step

# Activity feed
ACTIVITY_THRESHOLD = 0.7  # new entry when a uniform draw exceeds this
ACTIVITY_FEED_LIMIT = 10  # max entries retained (newest first)
ACTIVITY_EVENTS = [
    'Telemetry update received',
    'Route optimized',
    'Weather sync',
    'Position updated',
]
ACTIVITY_JUST_NOW = 'Just now'

# Toast notifications
TOAST_DURATION = 5.0  # seconds before a toast is removed automatically

# Asset inventory
LOW_BATTERY_THRESHOLD = 30.0  # percent, flagged in the fleet summary

# Mission filter
STATUS_FILTER_ALL = 'all'
