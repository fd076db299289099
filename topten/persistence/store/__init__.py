"""Key-value store implementations."""

from .file import FileKeyValueStore
from .memory import InMemoryKeyValueStore
from .sql import SqlKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "SqlKeyValueStore",
]
