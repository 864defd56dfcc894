from .base import PageStore
from .memory import MemoryPageStore
from .sql import SqlPageStore

__all__ = ["PageStore", "MemoryPageStore", "SqlPageStore"]
