"""
API Routes for Sellin TN

Store creation, lookup and listing.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from sellin.config import Settings
from sellin.models.request import CreateStoreRequest
from sellin.models.response import CreateStoreResponse, HealthResponse, StoreListResponse
from sellin.models.store import StoreRecord
from sellin.services.host_router import HostRouter
from sellin.services.page_service import PageService
from sellin.stores import (
    BaseStoreRegistry,
    InvalidIdentifierError,
    StorageFailureError,
    StoreConflictError,
    StoreNotFoundError,
)

logger = logging.getLogger(__name__)

# Handlers touching the registry are plain functions so that FastAPI runs
# them in its threadpool, off the event loop.
router = APIRouter(prefix="/api")

INTERNAL_ERROR = "Internal server error"


def get_store_registry(request: Request) -> BaseStoreRegistry:
    """The registry built at application startup."""
    return request.app.state.store_registry


def get_host_router(request: Request) -> HostRouter:
    return request.app.state.host_router


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_page_service(request: Request) -> PageService:
    return request.app.state.page_service


def create_store_or_raise(
    request: Request,
    payload: CreateStoreRequest,
    registry: BaseStoreRegistry,
    host_router: HostRouter
) -> CreateStoreResponse:
    """Create a store and translate registry errors into HTTP errors."""
    try:
        record = registry.create(payload.identifier)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)

    host = request.headers.get("host", "")
    if host_router.is_apex_host(host):
        scheme = get_app_settings(request).store_url_scheme
    else:
        scheme = request.url.scheme
    url = host_router.build_store_url(record.name, host, scheme=scheme)
    logger.info(f"Store {record.name} available at {url}")

    return CreateStoreResponse(identifier=record.name, url=url, created_at=record.created_at)


def get_store_or_raise(identifier: str, registry: BaseStoreRegistry) -> StoreRecord:
    try:
        return registry.get(identifier)
    except StoreNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.post("/stores", response_model=CreateStoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    request: Request,
    payload: CreateStoreRequest,
    registry: BaseStoreRegistry = Depends(get_store_registry),
    host_router: HostRouter = Depends(get_host_router)
):
    """Create a new store."""
    return create_store_or_raise(request, payload, registry, host_router)


@router.get("/stores", response_model=StoreListResponse)
def list_stores(registry: BaseStoreRegistry = Depends(get_store_registry)):
    """List store identifiers in creation order."""
    try:
        return StoreListResponse(stores=registry.list())
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.get("/stores/{identifier}", response_model=StoreRecord)
def get_store(identifier: str, registry: BaseStoreRegistry = Depends(get_store_registry)):
    """Get a store by name."""
    return get_store_or_raise(identifier, registry)


@router.post("/create-store", response_model=CreateStoreResponse, status_code=status.HTTP_201_CREATED)
def create_store_legacy(
    request: Request,
    payload: CreateStoreRequest,
    registry: BaseStoreRegistry = Depends(get_store_registry),
    host_router: HostRouter = Depends(get_host_router)
):
    """Create a new store (form endpoint kept for existing clients)."""
    return create_store_or_raise(request, payload, registry, host_router)


@router.get("/create-store")
def fetch_stores_legacy(
    name: Optional[str] = Query(None),
    registry: BaseStoreRegistry = Depends(get_store_registry)
):
    """Get one store by ``name``, or every store keyed by name."""
    if name:
        return get_store_or_raise(name, registry).to_wire()
    try:
        return {record.name: record.to_wire() for record in registry.records()}
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.get("/health", response_model=HealthResponse)
def health_check(registry: BaseStoreRegistry = Depends(get_store_registry)):
    """Health check endpoint."""
    try:
        return HealthResponse(status="healthy", stores=registry.count())
    except StorageFailureError:
        return HealthResponse(status="unhealthy", stores=0)
