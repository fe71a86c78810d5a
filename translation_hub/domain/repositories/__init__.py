"""Storage interfaces for the domain layer."""

from .storage_backend import StorageBackendInterface

__all__ = ["StorageBackendInterface"]
