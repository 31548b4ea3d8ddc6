"""
Store record model for Sellin TN
"""
from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Literal, Optional
from pydantic import BaseModel, Field

IDENTIFIER_MIN_LENGTH = 3
IDENTIFIER_MAX_LENGTH = 50

# Lowercase letters, digits and hyphens, no hyphen at either end
IDENTIFIER_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")

INVALID_IDENTIFIER_MESSAGE = (
    "Invalid store name. Use 3-50 characters, letters, numbers, and hyphens only, "
    "not starting or ending with a hyphen."
)


def normalize_identifier(raw: Optional[str]) -> str:
    """Trim and lowercase a submitted store name."""
    return (raw or "").strip().lower()


def is_valid_identifier(identifier: str) -> bool:
    """Check an already normalized identifier against the naming rule."""
    if not IDENTIFIER_MIN_LENGTH <= len(identifier) <= IDENTIFIER_MAX_LENGTH:
        return False
    return IDENTIFIER_PATTERN.match(identifier) is not None


def assets_path_for(identifier: str) -> str:
    return f"/stores/{identifier}/assets"


class StoreRecord(BaseModel):
    """A created store. Never mutated once stored."""

    name: str = Field(..., description="Store identifier, unique key")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp (UTC)")
    status: Literal["active"] = Field("active", description="Store status")
    subdomain: str = Field(..., description="Subdomain label of the store")
    assets_path: str = Field(..., alias="assetsPath", description="Where the store's assets live")

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "acme",
                "createdAt": "2025-01-01T12:00:00Z",
                "status": "active",
                "subdomain": "acme",
                "assetsPath": "/stores/acme/assets"
            }
        }

    @classmethod
    def new(cls, identifier: str, created_at: Optional[datetime] = None) -> StoreRecord:
        """Build the record of a freshly created store from a valid identifier."""
        return cls(
            name=identifier,
            created_at=created_at or datetime.now(timezone.utc),
            subdomain=identifier,
            assets_path=assets_path_for(identifier)
        )

    def to_wire(self) -> dict:
        """JSON-ready dict with the public field names."""
        return self.model_dump(mode="json", by_alias=True)
