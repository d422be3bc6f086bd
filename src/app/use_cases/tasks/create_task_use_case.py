import logging
from libs.result import Result, Error, Return
from src.app.repositories import TaskRepository, TaskStoreError
from src.app.services.title_validator import TitleValidator
from src.domain import Task
from .dtos import CreateTaskCommand, CreateTaskResponse, TaskDTO

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a new task"""

    def __init__(self, task_repo: TaskRepository, title_validator: TitleValidator):
        self.task_repo = task_repo
        self.title_validator = title_validator

    async def execute(self, command: CreateTaskCommand) -> Result[CreateTaskResponse]:
        """
        Execute the create task use case

        Returns:
            Result[CreateTaskResponse]: Success with the created task or error
        """
        validation_result = self.title_validator.validate(command.title)
        if validation_result.is_err():
            return Return.err(validation_result.error)

        # New tasks always start incomplete, whatever the client sent
        task = Task(title=validation_result.value, completed=False)

        try:
            created_task = await self.task_repo.create(task)
        except TaskStoreError as e:
            return Return.err(Error(code="STORE_ERROR", message=e.message))

        logger.info(f"Task created: {created_task.id}")

        return Return.ok(
            CreateTaskResponse(message="Task created", task=TaskDTO.from_entity(created_task))
        )
