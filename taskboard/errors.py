from __future__ import annotations

from typing import List, Optional


class BoardError(Exception):
    """Base class for failures raised by the board core."""

    code = "board_error"


class ValidationError(BoardError):
    """User input breaks a field constraint (empty title, unknown tag)."""

    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(BoardError):
    code = "not_found"


class NonEmptyColumnError(BoardError):
    code = "column_not_empty"

    def __init__(self, column_id: str, task_count: int) -> None:
        super().__init__(f"column {column_id!r} still contains {task_count} task(s) and cannot be deleted")
        self.column_id = column_id
        self.task_count = task_count


class InvariantViolation(BoardError):
    """A computed board failed the structural check.

    Signals a defect or stale ids from the caller; the prior board is kept.
    """

    code = "internal_error"

    def __init__(self, problems: List[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = list(problems)
