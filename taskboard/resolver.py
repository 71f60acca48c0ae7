"""Turn a finished drag gesture into a new board.

The input layer reports the dragged task (``active_id``) and whatever it
was released over (``over_id``): a column, another task, or nothing.
Gestures that cannot be resolved leave the board untouched.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from .errors import InvariantViolation
from .models import Board
from .queries import check_invariants, column_of, is_column

logger = logging.getLogger(__name__)


def _destination_column(board: Board, over_id: str) -> Optional[str]:
    if is_column(board, over_id):
        return over_id
    return column_of(board, over_id)


def _insert(order: List[str], active_id: str, over_id: str, dropped_on_column: bool) -> int:
    """Place ``active_id`` just before ``over_id``, or at the end."""
    if dropped_on_column or over_id not in order:
        order.append(active_id)
        return len(order) - 1
    index = order.index(over_id)
    order.insert(index, active_id)
    return index


def resolve_move(board: Board, active_id: str, over_id: Optional[str]) -> Board:
    if over_id is None:
        logger.debug("drag of %s ended outside any target", active_id)
        return board
    if active_id == over_id:
        return board

    source_id = column_of(board, active_id)
    if source_id is None:
        logger.debug("dragged id %s is not on the board", active_id)
        return board
    destination_id = _destination_column(board, over_id)
    if destination_id is None:
        logger.debug("drop target %s is not on the board", over_id)
        return board

    dropped_on_column = over_id == destination_id
    source = board.columns[source_id]
    source_index = source.task_ids.index(active_id)

    if source_id == destination_id:
        order = list(source.task_ids)
        order.pop(source_index)
        index = _insert(order, active_id, over_id, dropped_on_column)
        if tuple(order) == source.task_ids:
            return board
        candidate = board.with_columns(replace(source, task_ids=tuple(order)))
    else:
        destination = board.columns[destination_id]
        remaining = [tid for tid in source.task_ids if tid != active_id]
        order = list(destination.task_ids)
        index = _insert(order, active_id, over_id, dropped_on_column)
        candidate = board.with_columns(
            replace(source, task_ids=tuple(remaining)),
            replace(destination, task_ids=tuple(order)),
        )

    try:
        check_invariants(candidate)
    except InvariantViolation as exc:
        logger.error("discarding move of %s over %s: %s", active_id, over_id, exc.problems)
        return board

    logger.debug("moved task %s from %s[%d] to %s[%d]", active_id, source_id, source_index, destination_id, index)
    return candidate
