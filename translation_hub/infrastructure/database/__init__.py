"""Relational storage backend."""

from .backend import SQLStorageBackend
from .connection import ConnectionManager

__all__ = [
    "ConnectionManager",
    "SQLStorageBackend",
]
