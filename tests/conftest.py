import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# Ensure project root is on sys.path so `api.*` / `core.*` imports work
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from main import create_app
from api.routes import get_dataset_store
from services.dataset_store import DatasetError, DatasetStore


class FailingStore(DatasetStore):
    """Store whose every load fails the way a missing/corrupt file does."""

    def __init__(self):
        super().__init__(ROOT_DIR / "data")

    def load(self, name):
        raise DatasetError(f"Dataset {name} is unavailable")


@pytest.fixture()
def app():
    """Fresh FastAPI app per test so dependency overrides never leak."""
    return create_app()


@pytest.fixture()
def failing_app(app):
    """App whose dataset store always fails."""
    app.dependency_overrides[get_dataset_store] = FailingStore
    return app


@pytest_asyncio.fixture()
async def client(app):
    """Async test client calling the app in-memory, no real HTTP server."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture()
async def failing_client(failing_app):
    async with AsyncClient(transport=ASGITransport(app=failing_app), base_url="http://testserver") as ac:
        yield ac
