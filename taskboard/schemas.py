from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from .models import Board, Column, Tag, Task
from .queries import columns_in_order, tasks_in_column


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str = "1.0.0"


class TaskIn(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=8000)
    tag: Tag = Tag.FEATURE
    columnId: Optional[str] = None


class TaskPatch(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=8000)
    tag: Optional[Tag] = None


class TaskOut(BaseModel):
    id: str
    title: str
    description: str
    tag: Tag


class ColumnIn(BaseModel):
    title: str = Field(min_length=1, max_length=80)


class ColumnPatch(BaseModel):
    title: str = Field(min_length=1, max_length=80)


class ColumnOut(BaseModel):
    id: str
    title: str
    taskIds: list[str]


class ColumnView(ColumnOut):
    tasks: list[TaskOut]


class BoardView(BaseModel):
    columnOrder: list[str]
    columns: list[ColumnView]


class DragEnd(BaseModel):
    """A completed drag gesture; ``overId`` is null when dropped outside any target."""

    activeId: str
    overId: Optional[str] = None


def task_out(task: Task) -> TaskOut:
    return TaskOut(id=task.id, title=task.title, description=task.description, tag=task.tag)


def column_out(column: Column) -> ColumnOut:
    return ColumnOut(id=column.id, title=column.title, taskIds=list(column.task_ids))


def board_view(board: Board) -> BoardView:
    return BoardView(
        columnOrder=list(board.column_order),
        columns=[
            ColumnView(
                id=column.id,
                title=column.title,
                taskIds=list(column.task_ids),
                tasks=[task_out(t) for t in tasks_in_column(board, column.id)],
            )
            for column in columns_in_order(board)
        ],
    )
