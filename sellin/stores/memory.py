"""
In-memory store registry. Records live as long as the process.
"""
from __future__ import annotations

from sellin.models.store import StoreRecord
from sellin.stores.base import BaseStoreRegistry


class InMemoryStoreRegistry(BaseStoreRegistry):

    def __init__(self):
        super().__init__()
        self._records: dict[str, StoreRecord] = {}

    def _load(self) -> dict[str, StoreRecord]:
        return self._records

    def _insert(self, record: StoreRecord) -> None:
        self._records[record.name] = record
