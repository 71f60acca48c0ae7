from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from . import mutations
from .config import get_settings
from .errors import InvariantViolation
from .models import Board, Column, Tag, Task
from .queries import check_invariants, column_of, index_of, tasks_in_order
from .resolver import resolve_move
from .seed import initial_board

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoardRepository:
    """Holds the canonical board and commits every transition.

    Writers are serialized by one lock, so each accepted change sees all
    earlier ones. Readers get whole Board values and never a partial one.
    """

    def __init__(self, board: Board, intake_column: str = mutations.DEFAULT_INTAKE_COLUMN) -> None:
        check_invariants(board)
        self._board = board
        self.intake_column = intake_column
        self._lock = threading.Lock()

    @property
    def board(self) -> Board:
        return self._board

    # === Queries ===
    def column_of(self, task_id: str) -> Optional[str]:
        return column_of(self._board, task_id)

    def index_of(self, column_id: str, task_id: str) -> Optional[int]:
        return index_of(self._board, column_id, task_id)

    def tasks_in_order(self, column_id: str) -> List[Task]:
        return tasks_in_order(self._board, column_id)

    # === Transitions ===
    def apply_move(self, new_board: Board) -> Board:
        with self._lock:
            return self._commit(new_board)

    def _commit(self, new_board: Board) -> Board:
        if new_board is self._board:
            return new_board
        try:
            check_invariants(new_board)
        except InvariantViolation as exc:
            logger.error("rejected board transition: %s", exc.problems)
            raise
        self._board = new_board
        return new_board

    def _transition(self, step: Callable[[Board], Tuple[Board, T]]) -> T:
        with self._lock:
            new_board, result = step(self._board)
            self._commit(new_board)
            return result

    def move(self, active_id: str, over_id: Optional[str]) -> Board:
        with self._lock:
            return self._commit(resolve_move(self._board, active_id, over_id))

    def create_task(
        self,
        title: str,
        description: str = "",
        tag: Union[Tag, str] = Tag.FEATURE,
        column_id: Optional[str] = None,
    ) -> Task:
        task = self._transition(
            lambda b: mutations.create_task(b, title, description, tag, column_id, intake=self.intake_column)
        )
        logger.info("created task %s", task.id)
        return task

    def edit_task(self, task_id: str, **patch) -> Task:
        task = self._transition(lambda b: mutations.edit_task(b, task_id, **patch))
        logger.info("edited task %s", task_id)
        return task

    def delete_task(self, task_id: str) -> Board:
        with self._lock:
            before = self._board
            board = self._commit(mutations.delete_task(before, task_id))
        if board is not before:
            logger.info("deleted task %s", task_id)
        return board

    def create_column(self, title: str) -> Column:
        column = self._transition(lambda b: mutations.create_column(b, title))
        logger.info("created column %s", column.id)
        return column

    def rename_column(self, column_id: str, title: str) -> Column:
        return self._transition(lambda b: mutations.rename_column(b, column_id, title))

    def delete_column(self, column_id: str) -> Board:
        with self._lock:
            board = self._commit(mutations.delete_column(self._board, column_id))
        logger.info("deleted column %s", column_id)
        return board

    def reset(self, board: Board) -> Board:
        with self._lock:
            return self._commit(board)


_repository: Optional[BoardRepository] = None


def get_repository() -> BoardRepository:
    global _repository
    if _repository is None:
        settings = get_settings()
        _repository = BoardRepository(initial_board(settings.seed), intake_column=settings.intake_column)
    return _repository


def reset_repository() -> BoardRepository:
    global _repository
    _repository = None
    return get_repository()
