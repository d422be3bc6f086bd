from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from src.domain import Task


class TaskStoreError(Exception):
    """Raised when the document store fails to serve a request"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidTaskIdError(ValueError):
    """Raised when a task id is not in the store's id format"""


class TaskRepository(ABC):
    """Repository interface for Task entity"""

    @abstractmethod
    def is_valid_id(self, task_id: str) -> bool:
        """Check whether task_id is in the store's id format"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Insert a new task and return it with its assigned id"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """Return every stored task in the store's natural order"""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID, None if no document matches"""
        pass

    @abstractmethod
    async def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        """Set the given fields on a task. Returns False if no document matched."""
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """Delete a task. Returns False if no document matched."""
        pass
