"""
Sellin TN - Main Application

Create an online store in seconds: every store gets its own page, served on
a subdomain of the apex domain or under /store/{name}.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sellin import __version__
from sellin.config import Settings, get_settings
from sellin.middleware import HostRoutingMiddleware
from sellin.routes import router
from sellin.services.host_router import HostRouter
from sellin.services.page_service import PageService
from sellin.services.seed_loader import seed_registry
from sellin.stores import BaseStoreRegistry, build_store_registry

logger = logging.getLogger(__name__)

STATIC_PATH = Path(__file__).parent / "static"


def configure_logging(log_level: str):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info(f"Logging configured at {log_level.upper()} level.")


def create_app(settings: Optional[Settings] = None, registry: Optional[BaseStoreRegistry] = None) -> FastAPI:
    """Build the application. The registry is created once here and shared by every request."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Create an online store in seconds",
        version=__version__,
        debug=settings.debug
    )

    host_router = HostRouter(settings.apex_domain, settings.preview_domain_suffix)
    if registry is None:
        registry = build_store_registry(settings)
        seed_registry(registry, Path(settings.seed_path) if settings.seed_path else None)

    app.state.settings = settings
    app.state.host_router = host_router
    app.state.store_registry = registry
    app.state.page_service = PageService(app_name=settings.app_name)

    # Middleware stack (order matters - last added runs first)
    app.add_middleware(HostRoutingMiddleware, router=host_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount static files before router
    if STATIC_PATH.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        """Report configuration on startup."""
        logger.info(f"{settings.app_name} starting...")
        logger.info(f"Apex domain: {settings.apex_domain} (preview: {settings.preview_domain_suffix})")
        logger.info(f"Storage: {settings.storage_backend}, {registry.count()} store(s)")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"{settings.app_name} shutting down...")

    return app


configure_logging(get_settings().log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "sellin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
