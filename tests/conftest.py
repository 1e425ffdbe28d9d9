from typing import AsyncIterator, Iterator, List

import httpx
import mongomock
import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from pymongo.errors import ServerSelectionTimeoutError

from backend.core.config import Settings as BackendSettings
from backend.core.database import Database
from backend.main import create_app as create_backend_app
from frontend.config import Settings as FrontendSettings
from frontend.main import create_app as create_frontend_app

BACKEND_URL = "http://backend.test:5000"


class UnreachableClient:
    """Stands in for a MongoClient whose server never answers."""

    def __init__(self, *args, **kwargs):
        self.admin = self
        self.closed = False

    def command(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")

    def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def backend_settings() -> BackendSettings:
    return BackendSettings(_env_file=None, mongo_uri="mongodb://localhost:27017/contacts_test")


@pytest.fixture
def database(backend_settings: BackendSettings) -> Iterator[Database]:
    db = Database.from_settings(backend_settings, client_factory=mongomock.MongoClient)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def connected_database(database: Database) -> Database:
    assert database.connect()
    return database


@pytest.fixture
def test_app(backend_settings: BackendSettings, database: Database) -> FastAPI:
    return create_backend_app(backend_settings, database)


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "public"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<!DOCTYPE html><title>Entry</title>", encoding="utf-8")
    (root / "assets" / "app.js").write_text("console.log('ok');", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return root


@pytest.fixture
def frontend_settings(static_dir) -> FrontendSettings:
    return FrontendSettings(_env_file=None, backend_url=BACKEND_URL, static_dir=static_dir)


@pytest.fixture
def upstream_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def upstream_client(upstream_requests) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        return httpx.Response(
            201,
            json={"message": "Contact saved"},
            headers={"x-upstream": "yes"},
        )

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
async def frontend_client(frontend_settings, upstream_client) -> AsyncIterator[AsyncClient]:
    app = create_frontend_app(frontend_settings, upstream_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://frontend.test") as ac:
        yield ac
    await upstream_client.aclose()
