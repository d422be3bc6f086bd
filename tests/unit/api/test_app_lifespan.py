import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from pymongo.errors import ServerSelectionTimeoutError
from src.api.app import create_app, connect_to_store
from src.depends import get_task_repository
from src.adapter.repositories import MongoTaskRepository


class StubConfig:
    MONGO_URI = "mongodb://localhost:27017"
    MONGODB_DB_NAME = "taskdb"
    MONGODB_COLLECTION = "tasks"
    DB_CONNECT_TIMEOUT_SECONDS = 10
    CORS_ORIGINS = []
    CORS_ALLOW_CREDENTIALS = True
    ENABLE_LOGGING_MIDDLEWARE = False


def _mock_motor_client(ping):
    client = MagicMock()
    client.admin.command = ping
    return client


@pytest.mark.asyncio
async def test_connect_to_store_requires_mongo_uri():
    class NoUriConfig(StubConfig):
        MONGO_URI = ""

    with pytest.raises(RuntimeError, match="MONGO_URI not set"):
        await connect_to_store(NoUriConfig)


@pytest.mark.asyncio
async def test_connect_to_store_pings_with_timeout():
    client = _mock_motor_client(AsyncMock(return_value={"ok": 1}))

    with patch("src.api.app.AsyncIOMotorClient", return_value=client) as MockClient:
        result = await connect_to_store(StubConfig)

    assert result is client
    MockClient.assert_called_once_with(
        "mongodb://localhost:27017", serverSelectionTimeoutMS=10000
    )
    client.admin.command.assert_called_once_with("ping")


@pytest.mark.asyncio
async def test_connect_to_store_unreachable_closes_client():
    client = _mock_motor_client(AsyncMock(side_effect=ServerSelectionTimeoutError("no servers")))

    with patch("src.api.app.AsyncIOMotorClient", return_value=client):
        with pytest.raises(RuntimeError, match="Could not connect to MongoDB"):
            await connect_to_store(StubConfig)

    client.close.assert_called_once()


@pytest.mark.asyncio
async def test_connect_to_store_times_out():
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    class FastTimeoutConfig(StubConfig):
        DB_CONNECT_TIMEOUT_SECONDS = 0.01

    client = _mock_motor_client(hang)

    with patch("src.api.app.AsyncIOMotorClient", return_value=client):
        with pytest.raises(RuntimeError, match="Could not connect to MongoDB"):
            await connect_to_store(FastTimeoutConfig)

    client.close.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_fails_startup_without_store():
    class NoUriConfig(StubConfig):
        MONGO_URI = ""

    app = create_app(NoUriConfig)

    with pytest.raises(RuntimeError):
        async with app.router.lifespan_context(app):
            pass


@pytest.mark.asyncio
async def test_lifespan_opens_collection_and_closes_client():
    client = _mock_motor_client(AsyncMock(return_value={"ok": 1}))
    app = create_app(StubConfig)

    with patch("src.api.app.AsyncIOMotorClient", return_value=client):
        async with app.router.lifespan_context(app):
            assert app.state.mongo_client is client
            assert app.state.task_collection is client["taskdb"]["tasks"]
            client.close.assert_not_called()

    client.close.assert_called_once()


def test_task_repository_dependency_wraps_collection():
    collection = MagicMock()

    repo = get_task_repository(collection)

    assert isinstance(repo, MongoTaskRepository)
    assert repo.collection is collection
