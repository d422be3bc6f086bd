from src.app.repositories.task_repository import (
    TaskRepository,
    TaskStoreError,
    InvalidTaskIdError,
)

__all__ = [
    "TaskRepository",
    "TaskStoreError",
    "InvalidTaskIdError",
]
