from lawdesk.storage.base import Storage
from lawdesk.storage.memory import MemoryStorage

__all__ = ["Storage", "MemoryStorage"]
