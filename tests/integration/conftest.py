import pytest
import pytest_asyncio
from typing import Any, Dict, List, Optional
from bson import ObjectId
from httpx import AsyncClient, ASGITransport
from src.app.repositories import TaskRepository, TaskStoreError
from src.domain import Task
from src.depends import get_task_repository


class InMemoryTaskRepository(TaskRepository):
    """Dict-backed repository for integration tests, uses the store's id format"""

    def __init__(self):
        self.documents: Dict[str, Dict[str, Any]] = {}

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    async def create(self, task: Task) -> Task:
        task_id = str(ObjectId())
        self.documents[task_id] = {"title": task.title, "completed": task.completed}
        return Task(id=task_id, **self.documents[task_id])

    async def find_all(self) -> List[Task]:
        return [Task(id=task_id, **document) for task_id, document in self.documents.items()]

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        document = self.documents.get(task_id)
        if document is None:
            return None
        return Task(id=task_id, **document)

    async def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        if task_id not in self.documents:
            return False
        self.documents[task_id].update(
            {key: value for key, value in fields.items() if key not in ("id", "_id")}
        )
        return True

    async def delete(self, task_id: str) -> bool:
        return self.documents.pop(task_id, None) is not None


class UnavailableTaskRepository(InMemoryTaskRepository):
    """Repository whose store is unreachable"""

    async def create(self, task: Task) -> Task:
        raise TaskStoreError("connection refused")

    async def find_all(self) -> List[Task]:
        raise TaskStoreError("connection refused")

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        raise TaskStoreError("connection refused")

    async def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        raise TaskStoreError("connection refused")

    async def delete(self, task_id: str) -> bool:
        raise TaskStoreError("connection refused")


class StubConfig:
    MONGO_URI = "mongodb://localhost:27017"
    MONGODB_DB_NAME = "taskdb_test"
    MONGODB_COLLECTION = "tasks"
    DB_CONNECT_TIMEOUT_SECONDS = 10
    CORS_ORIGINS = []
    CORS_ALLOW_CREDENTIALS = True
    ENABLE_LOGGING_MIDDLEWARE = True


async def _client_for(task_repo: TaskRepository):
    from src.api.app import create_app

    app = create_app(StubConfig)

    def override_get_task_repository():
        return task_repo

    app.dependency_overrides[get_task_repository] = override_get_task_repository

    # ASGITransport does not run the lifespan, so no MongoDB connection is opened
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def task_repo():
    return InMemoryTaskRepository()


@pytest_asyncio.fixture
async def client(task_repo):
    async for ac in _client_for(task_repo):
        yield ac


@pytest_asyncio.fixture
async def unavailable_client():
    async for ac in _client_for(UnavailableTaskRepository()):
        yield ac
