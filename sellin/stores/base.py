"""
Store registry interface for Sellin TN

A registry owns the StoreRecords. Records are created once and never updated
or removed.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from threading import Lock
from typing import List, Optional

from sellin.models.store import (
    INVALID_IDENTIFIER_MESSAGE,
    StoreRecord,
    is_valid_identifier,
    normalize_identifier,
)

logger = logging.getLogger(__name__)


class StoreRegistryError(Exception):
    """Base class for registry failures."""


class InvalidIdentifierError(StoreRegistryError):
    def __init__(self, identifier: str):
        super().__init__(INVALID_IDENTIFIER_MESSAGE)
        self.identifier = identifier


class StoreConflictError(StoreRegistryError):
    def __init__(self, identifier: str):
        super().__init__("Store name already exists. Please choose a different name.")
        self.identifier = identifier


class StoreNotFoundError(StoreRegistryError):
    def __init__(self, identifier: str):
        super().__init__("Store not found")
        self.identifier = identifier


class StorageFailureError(StoreRegistryError):
    """The backing storage could not be read or written."""


class BaseStoreRegistry(ABC):
    """
    Validation and the atomic check-then-insert live here; backends only
    provide raw access to the identifier -> record mapping.
    """

    def __init__(self):
        self._lock = Lock()

    @abstractmethod
    def _load(self) -> dict[str, StoreRecord]:
        """Return the full mapping, in creation order."""

    @abstractmethod
    def _insert(self, record: StoreRecord) -> None:
        """Persist a new record. Called with the lock held."""

    def create(self, identifier: str, created_at: Optional[datetime] = None) -> StoreRecord:
        """Create a store, raising InvalidIdentifierError or StoreConflictError."""
        normalized = normalize_identifier(identifier)
        if not is_valid_identifier(normalized):
            raise InvalidIdentifierError(normalized)

        with self._lock:
            if normalized in self._load():
                raise StoreConflictError(normalized)
            record = StoreRecord.new(normalized, created_at)
            self._insert(record)

        logger.info(f"Store created: {normalized}")
        return record

    def get(self, identifier: str) -> StoreRecord:
        normalized = normalize_identifier(identifier)
        record = self._load().get(normalized)
        if record is None:
            raise StoreNotFoundError(normalized)
        return record

    def exists(self, identifier: str) -> bool:
        return normalize_identifier(identifier) in self._load()

    def list(self) -> List[str]:
        """Identifiers of every store, in creation order."""
        return list(self._load().keys())

    def records(self) -> List[StoreRecord]:
        return list(self._load().values())

    def count(self) -> int:
        return len(self._load())
