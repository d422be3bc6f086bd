from src.domain.enums import TitleCheck
from src.domain.task import Task, TITLE_MIN_LENGTH

__all__ = [
    # Enums
    "TitleCheck",
    # Entities
    "Task",
    "TITLE_MIN_LENGTH",
]
