import pytest
from fastapi.testclient import TestClient

from taskboard.main import app
from taskboard.models import Board, Column, Tag, Task
from taskboard.seed import demo_board
from taskboard.storage import BoardRepository, get_repository


def make_board(layout, order=None):
    """Build a board from ``{column_id: [task_id, ...]}``."""
    tasks = {}
    columns = {}
    for cid, task_ids in layout.items():
        columns[cid] = Column(cid, cid.title(), tuple(task_ids))
        for tid in task_ids:
            tasks[tid] = Task(tid, f"Title {tid}", "", Tag.FEATURE)
    return Board(tasks=tasks, columns=columns, column_order=tuple(order or layout))


def order_of(board, column_id):
    return list(board.columns[column_id].task_ids)


@pytest.fixture
def board():
    return demo_board()


@pytest.fixture
def repo(board):
    return BoardRepository(board)


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
