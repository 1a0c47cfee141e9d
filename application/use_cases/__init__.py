"""Application use cases."""
from .poll_roster import PollRosterUseCase, PollOutcome, CycleReport

__all__ = [
    'PollRosterUseCase',
    'PollOutcome',
    'CycleReport',
]
