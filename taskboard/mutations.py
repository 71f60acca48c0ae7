from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple, Union

from .errors import NonEmptyColumnError, NotFoundError, ValidationError
from .models import Board, Column, Tag, Task, clean_title

DEFAULT_INTAKE_COLUMN = "todo"

_TASK_FIELDS = ("title", "description", "tag")


def _intake_column(board: Board, column_id: Optional[str], intake: str) -> Column:
    if column_id is not None:
        column = board.columns.get(column_id)
        if column is None:
            raise NotFoundError(f"column {column_id!r} not found")
        return column
    if intake in board.columns:
        return board.columns[intake]
    if not board.column_order:
        raise ValidationError("board has no column to put the task in", field="columnId")
    return board.columns[board.column_order[0]]


def create_task(
    board: Board,
    title: str,
    description: str = "",
    tag: Union[Tag, str] = Tag.FEATURE,
    column_id: Optional[str] = None,
    intake: str = DEFAULT_INTAKE_COLUMN,
) -> Tuple[Board, Task]:
    """Append a new task to ``column_id``, or to the intake column when omitted."""
    task = Task.create(title, description, tag)
    column = _intake_column(board, column_id, intake)
    tasks = dict(board.tasks)
    tasks[task.id] = task
    columns = dict(board.columns)
    columns[column.id] = replace(column, task_ids=column.task_ids + (task.id,))
    return Board(tasks=tasks, columns=columns, column_order=board.column_order), task


def edit_task(board: Board, task_id: str, **patch) -> Tuple[Board, Task]:
    unknown = set(patch) - set(_TASK_FIELDS)
    if unknown:
        raise TypeError(f"edit_task() got unexpected fields: {sorted(unknown)}")
    task = board.tasks.get(task_id)
    if task is None:
        raise NotFoundError(f"task {task_id!r} not found")

    changes = {}
    if patch.get("title") is not None:
        changes["title"] = clean_title(patch["title"])
    if patch.get("description") is not None:
        changes["description"] = patch["description"].strip()
    if patch.get("tag") is not None:
        changes["tag"] = Tag.parse(patch["tag"])
    if not changes:
        return board, task

    updated = replace(task, **changes)
    tasks = dict(board.tasks)
    tasks[task_id] = updated
    return Board(tasks=tasks, columns=board.columns, column_order=board.column_order), updated


def delete_task(board: Board, task_id: str) -> Board:
    if task_id not in board.tasks:
        return board
    tasks = dict(board.tasks)
    del tasks[task_id]
    columns = dict(board.columns)
    for cid, column in board.columns.items():
        if task_id in column.task_ids:
            columns[cid] = replace(column, task_ids=tuple(t for t in column.task_ids if t != task_id))
    return Board(tasks=tasks, columns=columns, column_order=board.column_order)


def create_column(board: Board, title: str) -> Tuple[Board, Column]:
    column = Column.create(title)
    columns = dict(board.columns)
    columns[column.id] = column
    return Board(tasks=board.tasks, columns=columns, column_order=board.column_order + (column.id,)), column


def rename_column(board: Board, column_id: str, title: str) -> Tuple[Board, Column]:
    column = board.columns.get(column_id)
    if column is None:
        raise NotFoundError(f"column {column_id!r} not found")
    renamed = replace(column, title=clean_title(title, "column title"))
    return board.with_columns(renamed), renamed


def delete_column(board: Board, column_id: str) -> Board:
    column = board.columns.get(column_id)
    if column is None:
        raise NotFoundError(f"column {column_id!r} not found")
    if column.task_ids:
        raise NonEmptyColumnError(column_id, len(column.task_ids))
    columns = dict(board.columns)
    del columns[column_id]
    order = tuple(cid for cid in board.column_order if cid != column_id)
    return Board(tasks=board.tasks, columns=columns, column_order=order)
