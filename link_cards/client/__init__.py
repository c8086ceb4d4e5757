"""Client side of link cards: local storage, gateway client and the store."""

from link_cards.client.gateway import GatewayClient
from link_cards.client.storage import FileStorage, MemoryStorage, StoragePort
from link_cards.client.store import PreviewStore

__all__ = [
    "FileStorage",
    "GatewayClient",
    "MemoryStorage",
    "PreviewStore",
    "StoragePort",
]
