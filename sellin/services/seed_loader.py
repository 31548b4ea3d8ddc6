"""
Seed Loader for Sellin TN

Creates the stores listed in a YAML seed file when the application starts.

Expected layout::

    stores:
      - teststore
      - demo
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional
import yaml

from sellin.stores.base import BaseStoreRegistry, InvalidIdentifierError, StoreConflictError

logger = logging.getLogger(__name__)


def read_seed_identifiers(seed_path: Path) -> List[str]:
    """Identifiers listed in the seed file, or an empty list if there is none."""
    if not seed_path.exists():
        logger.warning(f"Seed file not found: {seed_path}")
        return []

    try:
        with open(seed_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError:
        logger.warning(f"Seed file is not valid YAML, ignoring it: {seed_path}")
        return []

    if not isinstance(config, dict):
        logger.warning(f"Seed file must be a mapping with a 'stores' list, ignoring it: {seed_path}")
        return []

    stores = config.get("stores") or []
    if not isinstance(stores, list):
        logger.warning(f"'stores' in {seed_path} must be a list, ignoring it")
        return []

    return [str(name) for name in stores]


def seed_registry(registry: BaseStoreRegistry, seed_path: Optional[Path]) -> List[str]:
    """Create every seeded store that does not exist yet. Returns those created."""
    if seed_path is None:
        return []

    created = []
    for identifier in read_seed_identifiers(Path(seed_path)):
        try:
            registry.create(identifier)
            created.append(identifier)
        except StoreConflictError:
            logger.debug(f"Seed store already exists: {identifier}")
        except InvalidIdentifierError:
            logger.warning(f"Skipping invalid seed store name: {identifier!r}")
    return created
