"""Sellin TN models."""
from sellin.models.request import CreateStoreRequest
from sellin.models.response import CreateStoreResponse, HealthResponse, StoreListResponse
from sellin.models.store import StoreRecord

__all__ = [
    "CreateStoreRequest",
    "CreateStoreResponse",
    "HealthResponse",
    "StoreListResponse",
    "StoreRecord",
]
