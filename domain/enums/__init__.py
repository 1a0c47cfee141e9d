"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType

__all__ = [
    'Region',
    'QueueType',
]
