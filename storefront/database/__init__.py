# Database modules

from .storage import KeyValueStorage, MemoryStorage, FileStorage, create_storage
from .carts import CartStore
from .orders import OrderHistoryStore

__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "create_storage",
    "CartStore",
    "OrderHistoryStore",
]
