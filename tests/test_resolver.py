import logging

import pytest

from conftest import make_board, order_of
from taskboard import resolver
from taskboard.errors import InvariantViolation
from taskboard.queries import find_violations
from taskboard.resolver import resolve_move


@pytest.fixture
def lanes():
    return make_board(
        {"todo": ["task-1", "task-2", "task-3"], "doing": ["task-4", "task-5"], "done": ["task-6"], "empty": []}
    )


def test_missing_target_is_noop(lanes):
    assert resolve_move(lanes, "task-1", None) is lanes


def test_unknown_ids_are_noop(lanes):
    assert resolve_move(lanes, "task-99", "done") is lanes
    assert resolve_move(lanes, "task-1", "nowhere") is lanes
    assert resolve_move(lanes, "todo", "done") is lanes


def test_drop_on_self_is_noop(lanes):
    assert resolve_move(lanes, "task-2", "task-2") is lanes


def test_same_column_move_up(lanes):
    moved = resolve_move(lanes, "task-2", "task-1")
    assert order_of(moved, "todo") == ["task-2", "task-1", "task-3"]
    assert sorted(order_of(moved, "todo")) == sorted(order_of(lanes, "todo"))


def test_same_column_move_down_lands_before_target(lanes):
    moved = resolve_move(lanes, "task-1", "task-3")
    assert order_of(moved, "todo") == ["task-2", "task-1", "task-3"]


def test_same_column_drop_on_column_appends(lanes):
    moved = resolve_move(lanes, "task-1", "todo")
    assert order_of(moved, "todo") == ["task-2", "task-3", "task-1"]


def test_same_column_drop_on_column_when_already_last(lanes):
    assert resolve_move(lanes, "task-3", "todo") is lanes


def test_cross_column_drop_on_column_appends():
    board = make_board({"todo": ["task-4", "task-5"], "done": ["task-6"]})
    moved = resolve_move(board, "task-4", "done")
    assert order_of(moved, "todo") == ["task-5"]
    assert order_of(moved, "done") == ["task-6", "task-4"]
    assert find_violations(moved) == []


def test_cross_column_drop_on_task_inserts_before_it():
    board = make_board({"todo": ["task-4", "task-5"], "done": ["task-6"]})
    moved = resolve_move(board, "task-4", "task-6")
    assert order_of(moved, "done") == ["task-4", "task-6"]
    assert order_of(moved, "todo") == ["task-5"]


def test_cross_column_into_empty_column(lanes):
    moved = resolve_move(lanes, "task-5", "empty")
    assert order_of(moved, "empty") == ["task-5"]
    assert order_of(moved, "doing") == ["task-4"]


def test_move_only_touches_affected_columns(lanes):
    moved = resolve_move(lanes, "task-1", "task-5")
    assert order_of(moved, "doing") == ["task-4", "task-1", "task-5"]
    assert moved.columns["done"] is lanes.columns["done"]
    assert moved.columns["empty"] is lanes.columns["empty"]
    assert moved.tasks is lanes.tasks
    assert moved.column_order == lanes.column_order


def test_input_board_is_not_mutated(lanes):
    before = lanes.to_dict()
    resolve_move(lanes, "task-1", "done")
    resolve_move(lanes, "task-3", "task-1")
    assert lanes.to_dict() == before


@pytest.mark.parametrize(
    "active, over",
    [("task-2", "task-1"), ("task-4", "task-6"), ("task-1", "task-3"), ("task-6", "doing")],
)
def test_repeated_move_is_stable(lanes, active, over):
    once = resolve_move(lanes, active, over)
    twice = resolve_move(once, active, over)
    assert twice == once


def test_invalid_result_is_discarded(lanes, monkeypatch, caplog):
    def broken(board):
        raise InvariantViolation(["task 'task-1' placed 2 times"])

    monkeypatch.setattr(resolver, "check_invariants", broken)
    with caplog.at_level(logging.ERROR, logger="taskboard.resolver"):
        assert resolve_move(lanes, "task-1", "done") is lanes
    assert "discarding move of task-1 over done" in caplog.text


def test_move_is_logged_with_both_positions(lanes, caplog):
    with caplog.at_level(logging.DEBUG, logger="taskboard.resolver"):
        resolve_move(lanes, "task-5", "task-6")
    assert "moved task task-5 from doing[1] to done[0]" in caplog.text
