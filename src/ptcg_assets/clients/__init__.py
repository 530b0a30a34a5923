"""Network clients for external data sources."""

from .client import Client, check_response
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .sets_client import PokemonTcgClient

__all__ = [
    "Client",
    "PokemonTcgClient",
    "check_response",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
]
