"""Consistency checks for an AppState.

Returns a list of human readable problems; an empty list means the state is
consistent. Not called by the commands themselves.
"""

from typing import List

from taskboard.schemas.state import AppState
from taskboard.services.ordering import sorted_ids


def _contiguous(orders: List[int]) -> bool:
    return sorted(orders) == list(range(len(orders)))


def check_references(state: AppState) -> List[str]:
    problems = []
    for column in state.columns.values():
        if column.board_id not in state.boards:
            problems.append(f"column {column.id} references missing board {column.board_id}")
    for task in state.tasks.values():
        if task.column_id not in state.columns:
            problems.append(f"task {task.id} references missing column {task.column_id}")
    if state.current_board_id is not None and state.current_board_id not in state.boards:
        problems.append(f"current board {state.current_board_id} does not exist")
    return problems


def check_membership(state: AppState) -> List[str]:
    """Each id cache holds exactly the ids of its children, whatever their order."""
    problems = []
    for board in state.boards.values():
        members = [c.id for c in state.columns.values() if c.board_id == board.id]
        if set(board.column_ids) != set(members) or len(board.column_ids) != len(members):
            problems.append(f"board {board.id} column_ids out of sync")
    for column in state.columns.values():
        members = [t.id for t in state.tasks.values() if t.column_id == column.id]
        if set(column.task_ids) != set(members) or len(column.task_ids) != len(members):
            problems.append(f"column {column.id} task_ids out of sync")
    return problems


def check_caches(state: AppState) -> List[str]:
    problems = check_membership(state)
    if problems:
        return problems
    for board in state.boards.values():
        if tuple(board.column_ids) != sorted_ids(state.columns, board.column_ids):
            problems.append(f"board {board.id} column_ids not sorted by order")
    for column in state.columns.values():
        if tuple(column.task_ids) != sorted_ids(state.tasks, column.task_ids):
            problems.append(f"column {column.id} task_ids not sorted by order")
    return problems


def check_orders(state: AppState) -> List[str]:
    problems = []
    for board in state.boards.values():
        orders = [c.order for c in state.columns.values() if c.board_id == board.id]
        if not _contiguous(orders):
            problems.append(f"board {board.id} column orders {sorted(orders)} not contiguous")
    for column in state.columns.values():
        orders = [t.order for t in state.tasks.values() if t.column_id == column.id]
        if not _contiguous(orders):
            problems.append(f"column {column.id} task orders {sorted(orders)} not contiguous")
    return problems


def check_invariants(state: AppState) -> List[str]:
    return check_references(state) + check_caches(state) + check_orders(state)
