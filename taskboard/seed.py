from __future__ import annotations

from .models import Board, Column, Tag, Task

DEFAULT_COLUMNS = (
    ("todo", "To Do"),
    ("inProgress", "In Progress"),
    ("done", "Done"),
)

DEMO_TASKS = (
    ("todo", Task("task-1", "Website-Design", "Erstellen eines neuen UI-Designs", Tag.DESIGN)),
    ("todo", Task("task-2", "API-Dokumentation", "REST-API dokumentieren", Tag.BACKEND)),
    ("todo", Task("task-3", "Login-System implementieren", "JWT Authentication", Tag.FEATURE)),
    ("inProgress", Task("task-4", "Komponententests", "Unit-Tests für React-Komponenten", Tag.TESTING)),
    ("inProgress", Task("task-5", "Mobile Responsive", "Mobilanpassung der Hauptseite", Tag.UI)),
    ("done", Task("task-6", "Deployment-Pipeline", "CI/CD-Pipeline einrichten", Tag.DEVOPS)),
)


def empty_board() -> Board:
    columns = {cid: Column(cid, title) for cid, title in DEFAULT_COLUMNS}
    return Board(tasks={}, columns=columns, column_order=tuple(cid for cid, _ in DEFAULT_COLUMNS))


def demo_board() -> Board:
    placed = {cid: [] for cid, _ in DEFAULT_COLUMNS}
    for cid, task in DEMO_TASKS:
        placed[cid].append(task.id)
    columns = {cid: Column(cid, title, tuple(placed[cid])) for cid, title in DEFAULT_COLUMNS}
    return Board(
        tasks={task.id: task for _, task in DEMO_TASKS},
        columns=columns,
        column_order=tuple(cid for cid, _ in DEFAULT_COLUMNS),
    )


def initial_board(kind: str = "demo") -> Board:
    if kind == "empty":
        return empty_board()
    if kind == "demo":
        return demo_board()
    raise ValueError(f"unknown seed {kind!r} (expected 'demo' or 'empty')")
