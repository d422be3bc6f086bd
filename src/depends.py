from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorCollection
from src.adapter.repositories import MongoTaskRepository
from src.app.repositories import TaskRepository
from src.app.services.title_validator import TitleValidator


def get_task_collection(request: Request) -> AsyncIOMotorCollection:
    """Task collection opened by the application lifespan"""
    return request.app.state.task_collection


def get_task_repository(
    collection: AsyncIOMotorCollection = Depends(get_task_collection),
) -> TaskRepository:
    return MongoTaskRepository(collection)


def get_title_validator() -> TitleValidator:
    return TitleValidator()
