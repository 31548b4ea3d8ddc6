"""
JSON file store registry.

All records are kept in one JSON object mapping identifier to record. The
file is read in full on every access and rewritten in full on every
creation, through a temporary file swapped in with os.replace.
"""
from __future__ import annotations
import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from sellin.models.store import StoreRecord
from sellin.stores.base import BaseStoreRegistry, StorageFailureError

logger = logging.getLogger(__name__)


class JsonFileStoreRegistry(BaseStoreRegistry):
    """File-based registry, usable across restarts and by several workers reading."""

    def __init__(self, json_path: Path):
        super().__init__()
        self.path = Path(json_path)

    def _load(self) -> dict[str, StoreRecord]:
        # First run: no file yet means no stores
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
            return {name: StoreRecord(**item) for name, item in raw.items()}
        except (OSError, ValueError, AttributeError, TypeError, ValidationError) as e:
            logger.exception(f"Could not read store records from {self.path}")
            raise StorageFailureError(f"Could not read {self.path}") from e

    def _save(self, records: dict[str, StoreRecord]) -> None:
        payload = {name: record.to_wire() for name, record in records.items()}
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False
            ) as f:
                tmp_name = f.name
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.exception(f"Could not write store records to {self.path}")
            raise StorageFailureError(f"Could not write {self.path}") from e

    def _insert(self, record: StoreRecord) -> None:
        records = self._load()
        records[record.name] = record
        self._save(records)
