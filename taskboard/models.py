from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Union

from .errors import ValidationError


# === Domain objects held by the repository ===


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


class Tag(str, Enum):
    DESIGN = "Design"
    BACKEND = "Backend"
    FEATURE = "Feature"
    TESTING = "Testing"
    UI = "UI"
    DEVOPS = "DevOps"
    BUG = "Bug"

    @classmethod
    def parse(cls, value: Union["Tag", str]) -> "Tag":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(t.value for t in cls)
            raise ValidationError(f"unknown tag {value!r} (expected one of: {allowed})", field="tag") from None


def clean_title(title: str, what: str = "title") -> str:
    """Strip ``title`` and reject it when nothing is left."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError(f"{what} must not be empty", field="title")
    return cleaned


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str = ""
    tag: Tag = Tag.FEATURE

    @classmethod
    def create(cls, title: str, description: str = "", tag: Union[Tag, str] = Tag.FEATURE) -> "Task":
        return cls(
            id=new_id("task"),
            title=clean_title(title),
            description=(description or "").strip(),
            tag=Tag.parse(tag),
        )


@dataclass(frozen=True)
class Column:
    id: str
    title: str
    task_ids: Tuple[str, ...] = ()

    @classmethod
    def create(cls, title: str) -> "Column":
        return cls(id=new_id("column"), title=clean_title(title, "column title"))


@dataclass(frozen=True)
class Board:
    """Aggregate root: task contents, columns and column display order.

    A Board is a value. Transitions build a new Board and share every
    Task and Column they did not touch; the dicts here are never
    mutated after construction.
    """

    tasks: Dict[str, Task] = field(default_factory=dict)
    columns: Dict[str, Column] = field(default_factory=dict)
    column_order: Tuple[str, ...] = ()

    def with_columns(self, *changed: Column) -> "Board":
        columns = dict(self.columns)
        for column in changed:
            columns[column.id] = column
        return Board(tasks=self.tasks, columns=columns, column_order=self.column_order)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": {
                cid: {"id": c.id, "title": c.title, "taskIds": list(c.task_ids)}
                for cid, c in self.columns.items()
            },
            "columnOrder": list(self.column_order),
            "tasks": {
                tid: {"id": t.id, "title": t.title, "description": t.description, "tag": t.tag.value}
                for tid, t in self.tasks.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Board":
        tasks = {
            tid: Task(
                id=raw.get("id", tid),
                title=raw["title"],
                description=raw.get("description", ""),
                tag=Tag.parse(raw.get("tag", Tag.FEATURE)),
            )
            for tid, raw in data.get("tasks", {}).items()
        }
        columns = {
            cid: Column(id=raw.get("id", cid), title=raw["title"], task_ids=tuple(raw.get("taskIds", ())))
            for cid, raw in data.get("columns", {}).items()
        }
        return cls(tasks=tasks, columns=columns, column_order=tuple(data.get("columnOrder", ())))
