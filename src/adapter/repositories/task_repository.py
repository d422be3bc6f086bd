import logging
from typing import Any, Dict, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from src.app.repositories import TaskRepository, TaskStoreError, InvalidTaskIdError
from src.domain import Task

logger = logging.getLogger(__name__)

# Fields owned by the store, never written from a request
_IMMUTABLE_FIELDS = ("_id", "id")


class MongoTaskRepository(TaskRepository):
    """MongoDB implementation of TaskRepository"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    def _object_id(self, task_id: str) -> ObjectId:
        if not self.is_valid_id(task_id):
            raise InvalidTaskIdError(f"'{task_id}' is not a valid task id")
        return ObjectId(task_id)

    @staticmethod
    def _to_task(document: Dict[str, Any]) -> Task:
        return Task(
            id=str(document["_id"]),
            title=document.get("title", ""),
            completed=bool(document.get("completed", False)),
        )

    async def create(self, task: Task) -> Task:
        """Insert a new task document"""
        document = {"title": task.title, "completed": task.completed}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Task insert failed: {e}")
            raise TaskStoreError(str(e)) from e

        return task.model_copy(update={"id": str(result.inserted_id)})

    async def find_all(self) -> List[Task]:
        """Return all task documents in natural order"""
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Task listing failed: {e}")
            raise TaskStoreError(str(e)) from e

        return [self._to_task(document) for document in documents]

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID"""
        object_id = self._object_id(task_id)
        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Task lookup failed for {task_id}: {e}")
            raise TaskStoreError(str(e)) from e

        if document is None:
            return None
        return self._to_task(document)

    async def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        """Apply a $set update with the given fields"""
        object_id = self._object_id(task_id)
        changes = {key: value for key, value in fields.items() if key not in _IMMUTABLE_FIELDS}
        try:
            if not changes:
                # Nothing to set, only report whether the task exists
                return await self.collection.count_documents({"_id": object_id}, limit=1) > 0

            result = await self.collection.update_one({"_id": object_id}, {"$set": changes})
        except PyMongoError as e:
            logger.error(f"Task update failed for {task_id}: {e}")
            raise TaskStoreError(str(e)) from e

        return result.matched_count > 0

    async def delete(self, task_id: str) -> bool:
        """Delete a task document"""
        object_id = self._object_id(task_id)
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Task delete failed for {task_id}: {e}")
            raise TaskStoreError(str(e)) from e

        return result.deleted_count > 0
