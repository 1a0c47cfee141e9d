"""Application layer - Services and use cases."""
from .services import PollScheduler, SnapshotCache, load_roster
from .use_cases import PollRosterUseCase

__all__ = [
    'PollScheduler',
    'SnapshotCache',
    'load_roster',
    'PollRosterUseCase',
]
