import pytest
from unittest.mock import MagicMock
from bson import ObjectId
from src.app.repositories import TaskRepository
from src.app.services.title_validator import TitleValidator


@pytest.fixture
def mock_task_repo():
    """Task repository mock that accepts ObjectId-formatted ids"""
    repo = MagicMock(spec=TaskRepository)
    repo.is_valid_id.side_effect = ObjectId.is_valid
    return repo


@pytest.fixture
def title_validator():
    return TitleValidator()


@pytest.fixture
def task_id():
    return "65a1f0c2e4b0a1b2c3d4e5f6"
