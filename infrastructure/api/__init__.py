"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .errors import RiotAPIError

__all__ = [
    'RiotAPIClient',
    'RiotAPIError',
]
