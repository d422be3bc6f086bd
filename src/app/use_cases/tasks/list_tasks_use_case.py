from libs.result import Result, Error, Return
from src.app.repositories import TaskRepository, TaskStoreError
from .dtos import ListTasksResponse, TaskDTO


class ListTasksUseCase:
    """Use case for listing every stored task"""

    def __init__(self, task_repo: TaskRepository):
        self.task_repo = task_repo

    async def execute(self) -> Result[ListTasksResponse]:
        """
        Execute the list tasks use case

        Returns:
            Result[ListTasksResponse]: Success with all tasks (unfiltered, store order) or error
        """
        try:
            tasks = await self.task_repo.find_all()
        except TaskStoreError as e:
            return Return.err(Error(code="STORE_ERROR", message=e.message))

        # Empty collection returns empty array
        return Return.ok(ListTasksResponse(tasks=[TaskDTO.from_entity(task) for task in tasks]))
