from __future__ import annotations

from collections import Counter
from typing import List, Optional

from .errors import InvariantViolation, NotFoundError
from .models import Board, Column, Task


def is_column(board: Board, item_id: Optional[str]) -> bool:
    return item_id is not None and item_id in board.columns


def columns_in_order(board: Board) -> List[Column]:
    return [board.columns[cid] for cid in board.column_order]


def tasks_in_column(board: Board, column_id: str) -> List[Task]:
    column = board.columns.get(column_id)
    if column is None:
        raise NotFoundError(f"column {column_id!r} not found")
    return [board.tasks[tid] for tid in column.task_ids]


tasks_in_order = tasks_in_column


def column_of(board: Board, task_id: str) -> Optional[str]:
    """Return the id of the column holding ``task_id``, scanning left to right."""
    for cid in board.column_order:
        column = board.columns.get(cid)
        if column is not None and task_id in column.task_ids:
            return cid
    return None


def index_of(board: Board, column_id: str, task_id: str) -> Optional[int]:
    column = board.columns.get(column_id)
    if column is None or task_id not in column.task_ids:
        return None
    return column.task_ids.index(task_id)


def find_violations(board: Board) -> List[str]:
    problems: List[str] = []

    order_counts = Counter(board.column_order)
    for cid, n in order_counts.items():
        if n > 1:
            problems.append(f"column {cid!r} listed {n} times in column order")
    if set(order_counts) != set(board.columns):
        missing = sorted(set(board.columns) - set(order_counts))
        unknown = sorted(set(order_counts) - set(board.columns))
        if missing:
            problems.append(f"columns missing from column order: {missing}")
        if unknown:
            problems.append(f"column order names unknown columns: {unknown}")

    placements: Counter = Counter()
    for cid, column in board.columns.items():
        if column.id != cid:
            problems.append(f"column keyed {cid!r} carries id {column.id!r}")
        seen = Counter(column.task_ids)
        for tid, n in seen.items():
            if n > 1:
                problems.append(f"task {tid!r} repeated {n} times in column {cid!r}")
            if tid not in board.tasks:
                problems.append(f"column {cid!r} references unknown task {tid!r}")
        placements.update(column.task_ids)

    for tid, task in board.tasks.items():
        if task.id != tid:
            problems.append(f"task keyed {tid!r} carries id {task.id!r}")
        if placements[tid] == 0:
            problems.append(f"task {tid!r} is not in any column")
        elif placements[tid] > 1:
            problems.append(f"task {tid!r} placed {placements[tid]} times")

    return problems


def check_invariants(board: Board) -> None:
    problems = find_violations(board)
    if problems:
        raise InvariantViolation(problems)
