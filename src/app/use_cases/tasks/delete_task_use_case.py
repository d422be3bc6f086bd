import logging
from libs.result import Result, Error, Return
from src.app.repositories import TaskRepository, TaskStoreError
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting a task"""

    def __init__(self, task_repo: TaskRepository):
        self.task_repo = task_repo

    async def execute(self, task_id: str) -> Result[MessageResponse]:
        if not self.task_repo.is_valid_id(task_id):
            return Return.err(
                Error(code="INVALID_ID", message=f"'{task_id}' is not a valid task id")
            )

        try:
            deleted = await self.task_repo.delete(task_id)
        except TaskStoreError as e:
            return Return.err(Error(code="STORE_ERROR", message=e.message))

        if not deleted:
            return Return.err(Error(code="TASK_NOT_FOUND", message="Task not found"))

        logger.info(f"Task deleted: {task_id}")

        return Return.ok(MessageResponse(message="Task deleted"))
