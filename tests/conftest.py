import pytest
from fastapi.testclient import TestClient

from sellin.config import Settings
from sellin.main import create_app
from sellin.services.host_router import HostRouter
from sellin.stores import InMemoryStoreRegistry, JsonFileStoreRegistry


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        apex_domain="sellin.tn",
        preview_domain_suffix="vercel.app",
        store_url_scheme="https",
        storage_backend="memory",
        seed_path=None,
    )


@pytest.fixture
def host_router(settings: Settings) -> HostRouter:
    return HostRouter(settings.apex_domain, settings.preview_domain_suffix)


@pytest.fixture
def registry() -> InMemoryStoreRegistry:
    return InMemoryStoreRegistry()


@pytest.fixture
def file_registry(tmp_path) -> JsonFileStoreRegistry:
    return JsonFileStoreRegistry(tmp_path / "data" / "stores.json")


@pytest.fixture
def app(settings, registry):
    return create_app(settings, registry=registry)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def client_for(app):
    """TestClient whose requests carry the given Host header."""
    def _client(host: str) -> TestClient:
        return TestClient(app, base_url=f"http://{host}")
    return _client
