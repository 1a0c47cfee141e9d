"""Infrastructure layer - API client and repositories."""
from .api import RiotAPIClient, RiotAPIError
from .repositories import PlayerRepository

__all__ = [
    'RiotAPIClient',
    'RiotAPIError',
    'PlayerRepository',
]
