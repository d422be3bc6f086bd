from src.app.use_cases.tasks.create_task_use_case import CreateTaskUseCase
from src.app.use_cases.tasks.list_tasks_use_case import ListTasksUseCase
from src.app.use_cases.tasks.get_task_by_id_use_case import GetTaskByIdUseCase
from src.app.use_cases.tasks.update_task_use_case import UpdateTaskUseCase
from src.app.use_cases.tasks.delete_task_use_case import DeleteTaskUseCase
from src.app.use_cases.tasks.dtos import (
    CreateTaskRequest,
    CreateTaskCommand,
    CreateTaskResponse,
    UpdateTaskRequest,
    UpdateTaskCommand,
    TaskDTO,
    ListTasksResponse,
    GetTaskResponse,
    MessageResponse,
)

__all__ = [
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskByIdUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "CreateTaskRequest",
    "CreateTaskCommand",
    "CreateTaskResponse",
    "UpdateTaskRequest",
    "UpdateTaskCommand",
    "TaskDTO",
    "ListTasksResponse",
    "GetTaskResponse",
    "MessageResponse",
]
