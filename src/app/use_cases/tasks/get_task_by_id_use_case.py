from libs.result import Result, Error, Return
from src.app.repositories import TaskRepository, TaskStoreError
from .dtos import GetTaskResponse, TaskDTO


class GetTaskByIdUseCase:
    """Use case for getting a single task by ID"""

    def __init__(self, task_repo: TaskRepository):
        self.task_repo = task_repo

    async def execute(self, task_id: str) -> Result[GetTaskResponse]:
        """
        Execute the get task by ID use case

        Args:
            task_id: ID of the task to retrieve

        Returns:
            Result[GetTaskResponse]: Success with task data or error
        """
        if not self.task_repo.is_valid_id(task_id):
            return Return.err(
                Error(code="INVALID_ID", message=f"'{task_id}' is not a valid task id")
            )

        try:
            task = await self.task_repo.get_by_id(task_id)
        except TaskStoreError as e:
            return Return.err(Error(code="STORE_ERROR", message=e.message))

        # A lookup miss is a domain condition, not a store failure
        if task is None:
            return Return.err(Error(code="TASK_NOT_FOUND", message="Task not found"))

        return Return.ok(GetTaskResponse(task=TaskDTO.from_entity(task)))
