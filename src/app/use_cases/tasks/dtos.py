from typing import List, Optional
from pydantic import BaseModel
from src.domain import Task


class CreateTaskRequest(BaseModel):
    """Request DTO for creating a task (API layer - from user input)"""

    title: Optional[str] = None
    completed: Optional[bool] = None  # Accepted but ignored, new tasks start incomplete


class CreateTaskCommand(BaseModel):
    """Command DTO for creating a task (Use case layer)"""

    title: Optional[str] = None


class UpdateTaskRequest(BaseModel):
    """Request DTO for updating a task. Only fields sent by the client are applied."""

    title: Optional[str] = None
    completed: Optional[bool] = None


class UpdateTaskCommand(BaseModel):
    """Command DTO for updating a task (Use case layer)"""

    task_id: str
    title: Optional[str] = None
    completed: Optional[bool] = None


class TaskDTO(BaseModel):
    """Public representation of a task"""

    id: str
    title: str
    completed: bool

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(id=task.id, title=task.title, completed=task.completed)


class CreateTaskResponse(BaseModel):
    """Response DTO for CreateTaskUseCase"""

    message: str
    task: TaskDTO


class ListTasksResponse(BaseModel):
    """Response DTO for ListTasksUseCase"""

    tasks: List[TaskDTO]


class GetTaskResponse(BaseModel):
    """Response DTO for GetTaskByIdUseCase"""

    task: TaskDTO


class MessageResponse(BaseModel):
    """Response DTO for use cases that only report an outcome"""

    message: str
