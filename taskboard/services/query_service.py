"""Read-only views over the AppState: board columns, filtered tasks, board list."""

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from taskboard.schemas.board import Board
from taskboard.schemas.column import Column
from taskboard.schemas.state import AppState, SearchFilters
from taskboard.schemas.task import Task
from taskboard.services.due_dates import is_overdue, is_today, is_this_week


def columns_for_board(state: AppState, board_id: str) -> List[Column]:
    columns = [c for c in state.columns.values() if c.board_id == board_id]
    return sorted(columns, key=lambda c: c.order)


def _matches_due_date(task: Task, due_date_filter: str, today: date) -> bool:
    if due_date_filter == "overdue":
        return is_overdue(task.due_date, today)
    if due_date_filter == "today":
        return is_today(task.due_date, today)
    if due_date_filter == "week":
        return is_this_week(task.due_date, today)
    return True


def filter_tasks(
    state: AppState,
    board_id: str,
    filters: Optional[SearchFilters] = None,
    today: Optional[date] = None,
) -> List[Task]:
    """Tasks of the board's columns matching every active filter.

    Sorted by column order, then task order. ``today`` is read once per call.
    """
    filters = filters or SearchFilters()
    today = today if today is not None else date.today()
    column_rank = {c.id: c.order for c in columns_for_board(state, board_id)}

    tasks = [t for t in state.tasks.values() if t.column_id in column_rank]

    # recherche
    if filters.search_term:
        term = filters.search_term.lower()
        tasks = [t for t in tasks if term in t.title.lower() or term in t.description.lower()]

    # priorité
    if filters.priority != "all":
        tasks = [t for t in tasks if t.priority == filters.priority]

    # échéance
    if filters.due_date_filter != "all":
        tasks = [t for t in tasks if _matches_due_date(t, filters.due_date_filter, today)]

    return sorted(tasks, key=lambda t: (column_rank[t.column_id], t.order))


def group_by_column(tasks: Sequence[Task], columns: Sequence[Column]) -> Dict[str, List[Task]]:
    grouped: Dict[str, List[Task]] = {c.id: [] for c in columns}
    for task in sorted(tasks, key=lambda t: t.order):
        if task.column_id in grouped:
            grouped[task.column_id].append(task)
    return grouped


def board_summaries(state: AppState) -> List[Tuple[Board, int]]:
    """Boards by creation date with their column count."""
    counts: Dict[str, int] = {}
    for column in state.columns.values():
        counts[column.board_id] = counts.get(column.board_id, 0) + 1
    boards = sorted(state.boards.values(), key=lambda b: b.created_at)
    return [(board, counts.get(board.id, 0)) for board in boards]
