from src.adapter.repositories.task_repository import MongoTaskRepository

__all__ = [
    "MongoTaskRepository",
]
