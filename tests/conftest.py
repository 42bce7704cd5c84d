from typing import Any, AsyncGenerator, Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from alembic import command
from alembic.config import Config
from doga_server import database
from doga_server.dependencies import get_db_session, get_readonly_db_session, get_storage
from doga_server.services.storage import StoredObject
from doga_server.settings import Settings

ADMIN_USERNAME = "dogahotel"
ADMIN_PASSWORD = "secret"
MEDIA_BASE_URL = "https://media.test/dogahotelfethiye"


class DummyStorage:
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    def public_url(self, key: str) -> str:
        return f"{MEDIA_BASE_URL}/{key}"

    async def put_object(self, key: str, data: bytes, content_type: str) -> StoredObject:
        self.objects[key] = (data, content_type)
        return StoredObject(key=key, url=self.public_url(key), content_type=content_type, size=len(data))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        jwt_secret="test-secret-with-enough-bytes-for-hs256",
    )


@pytest.fixture
def storage() -> DummyStorage:
    return DummyStorage()


@pytest.fixture
def client(settings: Settings, storage: DummyStorage) -> Generator[TestClient, None, None]:
    import uuid

    from sqlalchemy import create_engine
    from starlette.routing import _DefaultLifespan

    from doga_server.app import create_app

    db_name = f"doga_test_{uuid.uuid4().hex}"
    shared_memory_uri = f"file:{db_name}?mode=memory&cache=shared&uri=true"
    sync_engine = create_engine(f"sqlite+pysqlite:///{shared_memory_uri}", poolclass=StaticPool)

    alembic_cfg = Config("alembic.ini")
    with sync_engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")

    engine = create_async_engine(f"sqlite+aiosqlite:///{shared_memory_uri}", echo=False, poolclass=StaticPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with database.get_session(session_maker) as session:
            yield session

    async def override_readonly_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with database.get_session(session_maker, read_only=True) as session:
            yield session

    app = create_app(settings)

    app.router.lifespan_context = _DefaultLifespan(app.router)

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_readonly_db_session] = override_readonly_db_session
    app.dependency_overrides[get_storage] = lambda: storage

    with TestClient(app) as test_client:
        yield test_client

    sync_engine.dispose()


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    response = client.post("/api/admin/auth", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def make_room(admin_client: TestClient) -> Callable[..., dict[str, Any]]:
    def _make_room(**fields: Any) -> dict[str, Any]:
        body: dict[str, Any] = {"nameTR": "Deniz Odası", "nameEN": "Sea Room", "capacity": 2, "size": 24}
        body.update(fields)
        response = admin_client.post("/api/rooms", json=body)
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _make_room
