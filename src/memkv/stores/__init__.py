"""Store backends for the path-keyed configuration cache."""

from memkv.stores.base import Store
from memkv.stores.memory import MemoryStore

__all__ = ["MemoryStore", "Store"]
