"""Queue type enumeration for ranked standings."""
from enum import Enum


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    Provides:
    - api_queue_name: ``queueType`` string returned by league endpoints
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def api_queue_name(self) -> str:
        """Get queue name string used in /league payloads."""
        return self.name
