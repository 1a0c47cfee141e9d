"""Application services root exports."""
from .poll_scheduler import PollScheduler, SchedulerStatus
from .roster_loader import load_roster, parse_roster, PLACEHOLDER_ROSTER
from .snapshot_cache import SnapshotCache

__all__ = [
    "PollScheduler",
    "SchedulerStatus",
    "load_roster",
    "parse_roster",
    "PLACEHOLDER_ROSTER",
    "SnapshotCache",
]
