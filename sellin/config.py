"""
Sellin TN Configuration
"""
from __future__ import annotations
from typing import List, Literal, Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    app_name: str = "Sellin TN"
    debug: bool = True
    log_level: str = "info"

    # Domain Configuration
    # - apex_domain: production root under which store subdomains are issued
    # - preview_domain_suffix: hosting platform domain without per-store subdomains
    apex_domain: str = "sellin.tn"
    preview_domain_suffix: str = "vercel.app"
    store_url_scheme: str = "https"

    # Storage Configuration
    # "memory" keeps records for the lifetime of the process,
    # "file" keeps them in a single JSON document at storage_path
    storage_backend: Literal["memory", "file"] = "memory"
    storage_path: str = "data/stores.json"
    seed_path: Optional[str] = None

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
