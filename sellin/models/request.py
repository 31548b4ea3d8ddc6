"""
Request models for Sellin TN
"""
from __future__ import annotations
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class CreateStoreRequest(BaseModel):
    """Request body for store creation."""

    identifier: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("identifier", "storeName"),
        description="Requested store name"
    )

    @field_validator("identifier", mode="before")
    @classmethod
    def non_string_is_missing(cls, value: Any) -> Optional[str]:
        # Missing, null and non-string names are all rejected by the naming rule
        return value if isinstance(value, str) else None
