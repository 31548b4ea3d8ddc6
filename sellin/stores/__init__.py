"""Store registries for Sellin TN."""
from __future__ import annotations
from pathlib import Path

from sellin.config import Settings
from sellin.stores.base import (
    BaseStoreRegistry,
    InvalidIdentifierError,
    StorageFailureError,
    StoreConflictError,
    StoreNotFoundError,
    StoreRegistryError,
)
from sellin.stores.json_file import JsonFileStoreRegistry
from sellin.stores.memory import InMemoryStoreRegistry


def build_store_registry(settings: Settings) -> BaseStoreRegistry:
    """Create the single registry backend selected by configuration."""
    if settings.storage_backend == "file":
        return JsonFileStoreRegistry(Path(settings.storage_path))
    return InMemoryStoreRegistry()


__all__ = [
    "BaseStoreRegistry",
    "InMemoryStoreRegistry",
    "InvalidIdentifierError",
    "JsonFileStoreRegistry",
    "StorageFailureError",
    "StoreConflictError",
    "StoreNotFoundError",
    "StoreRegistryError",
    "build_store_registry",
]
