"""
Page Routes for Sellin TN

The landing page and the store pages. Store subdomain requests reach
``/store/{identifier}`` through the host routing middleware.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from starlette.concurrency import run_in_threadpool

from sellin.config import Settings
from sellin.routes.api import get_app_settings, get_page_service, get_store_registry
from sellin.services.page_service import PageService
from sellin.stores import BaseStoreRegistry, StorageFailureError, StoreNotFoundError

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(
    settings: Settings = Depends(get_app_settings),
    pages: PageService = Depends(get_page_service)
):
    """Serve the store creation page."""
    return HTMLResponse(content=await pages.render_home(settings.apex_domain))


@router.get("/store/{identifier}", response_class=HTMLResponse)
async def store_page(
    identifier: str,
    settings: Settings = Depends(get_app_settings),
    registry: BaseStoreRegistry = Depends(get_store_registry),
    pages: PageService = Depends(get_page_service)
):
    """Serve the page of one store, or a 404 page if it does not exist."""
    try:
        record = await run_in_threadpool(registry.get, identifier)
    except StoreNotFoundError:
        return HTMLResponse(content=await pages.render_not_found(identifier), status_code=404)
    except StorageFailureError:
        return HTMLResponse(content="Internal server error", status_code=500)

    return HTMLResponse(content=await pages.render_store(record, settings.apex_domain))


@router.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=204)
