"""In-memory storage backend."""

from .backend import MemoryStorageBackend

__all__ = ["MemoryStorageBackend"]
