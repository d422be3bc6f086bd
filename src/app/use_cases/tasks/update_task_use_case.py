import logging
from typing import Any, Dict
from libs.result import Result, Error, Return
from src.app.repositories import TaskRepository, TaskStoreError
from src.app.services.title_validator import TitleValidator
from .dtos import UpdateTaskCommand, MessageResponse

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for partially updating an existing task"""

    def __init__(self, task_repo: TaskRepository, title_validator: TitleValidator):
        self.task_repo = task_repo
        self.title_validator = title_validator

    async def execute(self, command: UpdateTaskCommand) -> Result[MessageResponse]:
        """
        Execute the update task use case

        Only fields explicitly set on the command are written. A title that is
        set (even to None) goes through the same validation as on create.

        Returns:
            Result[MessageResponse]: Success message or error
        """
        if not self.task_repo.is_valid_id(command.task_id):
            return Return.err(
                Error(code="INVALID_ID", message=f"'{command.task_id}' is not a valid task id")
            )

        fields: Dict[str, Any] = {}

        if "title" in command.model_fields_set:
            validation_result = self.title_validator.validate(command.title)
            if validation_result.is_err():
                return Return.err(validation_result.error)
            fields["title"] = validation_result.value

        if "completed" in command.model_fields_set and command.completed is not None:
            fields["completed"] = command.completed

        try:
            matched = await self.task_repo.update(command.task_id, fields)
        except TaskStoreError as e:
            return Return.err(Error(code="STORE_ERROR", message=e.message))

        if not matched:
            return Return.err(Error(code="TASK_NOT_FOUND", message="Task not found"))

        logger.info(f"Task updated: {command.task_id} (fields: {sorted(fields)})")

        return Return.ok(MessageResponse(message="Task updated"))
