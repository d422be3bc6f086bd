from fastapi import APIRouter, Depends, status
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.repositories import TaskRepository
from src.app.services.title_validator import TitleValidator
from src.depends import get_task_repository, get_title_validator
from src.app.use_cases.tasks import (
    CreateTaskUseCase,
    CreateTaskRequest,
    CreateTaskCommand,
    CreateTaskResponse,
    ListTasksUseCase,
    ListTasksResponse,
    GetTaskByIdUseCase,
    GetTaskResponse,
    UpdateTaskUseCase,
    UpdateTaskRequest,
    UpdateTaskCommand,
    DeleteTaskUseCase,
    MessageResponse,
)

router = APIRouter()

_CLIENT_ERROR_STATUS = {
    "INVALID_ID": status.HTTP_400_BAD_REQUEST,
    "TITLE_EMPTY": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "TITLE_TOO_SHORT": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "TASK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error):
    """Translate a use case error into the matching HTTP error"""
    if error.code in _CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=_CLIENT_ERROR_STATUS[error.code])
    raise ServerError(error)


@router.post("/tasks", response_model=CreateTaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    task_repo: TaskRepository = Depends(get_task_repository),
    title_validator: TitleValidator = Depends(get_title_validator),
):
    """Create a new task. `completed` is always false on creation."""
    command = CreateTaskCommand(title=request.title)

    use_case = CreateTaskUseCase(task_repo, title_validator)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/tasks", response_model=ListTasksResponse, status_code=status.HTTP_200_OK)
async def list_tasks(task_repo: TaskRepository = Depends(get_task_repository)):
    """List every stored task"""
    use_case = ListTasksUseCase(task_repo)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/tasks/{task_id}", response_model=GetTaskResponse, status_code=status.HTTP_200_OK)
async def get_task_by_id(
    task_id: str,
    task_repo: TaskRepository = Depends(get_task_repository),
):
    """Get a single task by ID"""
    use_case = GetTaskByIdUseCase(task_repo)
    result = await use_case.execute(task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/tasks/{task_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    task_repo: TaskRepository = Depends(get_task_repository),
    title_validator: TitleValidator = Depends(get_title_validator),
):
    """Update the fields of a task that are present in the body"""
    # Only forward fields the client actually sent, so they stay distinguishable from defaults
    command = UpdateTaskCommand(task_id=task_id, **request.model_dump(exclude_unset=True))

    use_case = UpdateTaskUseCase(task_repo, title_validator)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/tasks/{task_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: str,
    task_repo: TaskRepository = Depends(get_task_repository),
):
    """Delete a task"""
    use_case = DeleteTaskUseCase(task_repo)
    result = await use_case.execute(task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
