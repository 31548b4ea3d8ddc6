"""
Response models for Sellin TN
"""
from __future__ import annotations
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class CreateStoreResponse(BaseModel):
    """Response returned once a store has been created."""

    message: str = Field("Store created successfully!", description="Human readable outcome")
    identifier: str = Field(..., description="Normalized store name")
    url: str = Field(..., description="Public URL of the store")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "message": "Store created successfully!",
                "identifier": "acme",
                "url": "https://acme.sellin.tn",
                "createdAt": "2025-01-01T12:00:00Z"
            }
        }


class StoreListResponse(BaseModel):
    """Identifiers of every store, in creation order."""

    stores: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "healthy"
    stores: int = 0
