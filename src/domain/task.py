from typing import Optional
from pydantic import BaseModel

TITLE_MIN_LENGTH = 5


class Task(BaseModel):
    """A titled, completable record. `id` is assigned by the store on insert."""

    id: Optional[str] = None
    title: str
    completed: bool = False
