# Clients for the remote record API.
# Created: 2026-09-16

from vivarium.clients.auth import AuthClient, AuthSession
from vivarium.clients.base import ApiClient, ApiError
from vivarium.clients.reptiles import ReptileClient, ReptileStats
from vivarium.clients.todos import TodoClient
from vivarium.clients.users import UserClient

__all__ = [
    "ApiClient",
    "ApiError",
    "AuthClient",
    "AuthSession",
    "ReptileClient",
    "ReptileStats",
    "TodoClient",
    "UserClient",
]
