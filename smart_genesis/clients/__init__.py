"""Smart Genesis resource clients."""

from smart_genesis.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
