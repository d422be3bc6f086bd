from enum import Enum


class TitleCheck(str, Enum):
    """Outcome of validating a task title"""
    ok = "ok"
    empty = "empty"
    too_short = "too_short"
