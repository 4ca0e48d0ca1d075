"""
Board engine - pure commands over the AppState

Each command takes the current state and returns a MutationResult holding the
next state. The input state is never modified. A command that references an
unknown id returns the input state unchanged with Outcome.NOT_FOUND.
"""

import logging
import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from taskboard.core.config import settings
from taskboard.schemas.board import Board
from taskboard.schemas.column import Column
from taskboard.schemas.state import AppState
from taskboard.schemas.task import Task
from taskboard.services.ordering import (
    insert_id,
    move_id,
    remove_id,
    renumber,
)

logger = logging.getLogger(__name__)

EDITABLE_TASK_FIELDS = ("title", "description", "created_by", "priority", "due_date")


class Outcome(str, Enum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"
    IGNORED = "ignored"


class MutationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: AppState
    outcome: Outcome = Outcome.APPLIED
    entity_id: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.APPLIED


def generate_id() -> str:
    return uuid.uuid4().hex


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _compact(compact: Optional[bool]) -> bool:
    return settings.COMPACT_ORDERS if compact is None else compact


def _applied(state: AppState, entity_id: Optional[str] = None) -> MutationResult:
    return MutationResult(state=state, entity_id=entity_id)


def _not_found(state: AppState, kind: str, entity_id: Optional[str]) -> MutationResult:
    logger.warning(f"{kind} {entity_id} not found, command skipped")
    return MutationResult(
        state=state,
        outcome=Outcome.NOT_FOUND,
        entity_id=entity_id,
        detail=f"{kind} not found",
    )


# ---------- boards ----------

def create_board(
    state: AppState,
    title: str,
    description: str = "",
    created_by: str = "",
    now: Optional[datetime] = None,
) -> MutationResult:
    board = Board(
        id=generate_id(),
        title=title,
        description=description,
        created_by=created_by,
        created_at=_now(now),
    )
    boards = {**state.boards, board.id: board}
    logger.debug(f"Board {board.id} created")
    return _applied(state.model_copy(update={"boards": boards}), board.id)


def delete_board(state: AppState, board_id: str) -> MutationResult:
    """Remove a board with all its columns and their tasks."""
    if board_id not in state.boards:
        return _not_found(state, "Board", board_id)

    doomed_columns = {c.id for c in state.columns.values() if c.board_id == board_id}
    boards = {k: b for k, b in state.boards.items() if k != board_id}
    columns = {k: c for k, c in state.columns.items() if k not in doomed_columns}
    tasks = {k: t for k, t in state.tasks.items() if t.column_id not in doomed_columns}
    current = None if state.current_board_id == board_id else state.current_board_id

    logger.debug(f"Board {board_id} deleted with {len(doomed_columns)} columns")
    return _applied(
        state.model_copy(update={
            "boards": boards,
            "columns": columns,
            "tasks": tasks,
            "current_board_id": current,
        }),
        board_id,
    )


def set_current_board(state: AppState, board_id: Optional[str]) -> MutationResult:
    if board_id is not None and board_id not in state.boards:
        return _not_found(state, "Board", board_id)
    return _applied(state.model_copy(update={"current_board_id": board_id}), board_id)


# ---------- columns ----------

def create_column(state: AppState, title: str, board_id: str) -> MutationResult:
    board = state.boards.get(board_id)
    if board is None:
        return _not_found(state, "Board", board_id)

    siblings = [c for c in state.columns.values() if c.board_id == board_id]
    column = Column(id=generate_id(), title=title, board_id=board_id, order=len(siblings))
    columns = {**state.columns, column.id: column}
    boards = {
        **state.boards,
        board_id: board.model_copy(update={"column_ids": insert_id(board.column_ids, column.id, len(board.column_ids))}),
    }
    return _applied(state.model_copy(update={"columns": columns, "boards": boards}), column.id)


def update_column(state: AppState, column_id: str, title: str) -> MutationResult:
    column = state.columns.get(column_id)
    if column is None:
        return _not_found(state, "Column", column_id)
    columns = {**state.columns, column_id: column.model_copy(update={"title": title})}
    return _applied(state.model_copy(update={"columns": columns}), column_id)


def delete_column(state: AppState, column_id: str, compact: Optional[bool] = None) -> MutationResult:
    """Remove a column and its tasks, and drop it from the board's column_ids.

    With compaction the remaining columns of the board are renumbered.
    """
    column = state.columns.get(column_id)
    if column is None:
        return _not_found(state, "Column", column_id)

    columns = {k: c for k, c in state.columns.items() if k != column_id}
    tasks = {k: t for k, t in state.tasks.items() if t.column_id != column_id}
    boards = dict(state.boards)

    board = boards.get(column.board_id)
    if board is not None:
        column_ids = remove_id(board.column_ids, column_id)
        if _compact(compact):
            columns = renumber(columns, column_ids)
        boards[board.id] = board.model_copy(update={"column_ids": column_ids})

    return _applied(
        state.model_copy(update={"columns": columns, "tasks": tasks, "boards": boards}),
        column_id,
    )


# ---------- tasks ----------

def create_task(
    state: AppState,
    column_id: str,
    title: str,
    due_date: date,
    description: str = "",
    created_by: str = "",
    priority: str = "medium",
    now: Optional[datetime] = None,
) -> MutationResult:
    column = state.columns.get(column_id)
    if column is None:
        return _not_found(state, "Column", column_id)

    siblings = [t for t in state.tasks.values() if t.column_id == column_id]
    task = Task(
        id=generate_id(),
        title=title,
        description=description,
        created_by=created_by,
        priority=priority,
        due_date=due_date,
        created_at=_now(now),
        column_id=column_id,
        order=len(siblings),
    )
    tasks = {**state.tasks, task.id: task}
    columns = {
        **state.columns,
        column_id: column.model_copy(update={"task_ids": insert_id(column.task_ids, task.id, len(column.task_ids))}),
    }
    logger.debug(f"Task {task.id} created in column {column_id}")
    return _applied(state.model_copy(update={"tasks": tasks, "columns": columns}), task.id)


def update_task(state: AppState, task_id: str, updates: Dict[str, Any]) -> MutationResult:
    """Merge ``updates`` into the task. Only EDITABLE_TASK_FIELDS are applied."""
    task = state.tasks.get(task_id)
    if task is None:
        return _not_found(state, "Task", task_id)

    changes = {k: v for k, v in updates.items() if k in EDITABLE_TASK_FIELDS}
    ignored = sorted(set(updates) - set(changes))
    if ignored:
        logger.info(f"Task {task_id}: ignoring non-editable fields {ignored}")

    tasks = {**state.tasks, task_id: task.model_copy(update=changes)}
    return _applied(state.model_copy(update={"tasks": tasks}), task_id)


def delete_task(state: AppState, task_id: str, compact: Optional[bool] = None) -> MutationResult:
    task = state.tasks.get(task_id)
    if task is None:
        return _not_found(state, "Task", task_id)

    tasks = {k: t for k, t in state.tasks.items() if k != task_id}
    columns = dict(state.columns)

    column = columns.get(task.column_id)
    if column is not None:
        task_ids = remove_id(column.task_ids, task_id)
        if _compact(compact):
            tasks = renumber(tasks, task_ids)
        columns[column.id] = column.model_copy(update={"task_ids": task_ids})

    return _applied(state.model_copy(update={"tasks": tasks, "columns": columns}), task_id)


def move_task(
    state: AppState,
    task_id: str,
    new_column_id: str,
    new_order: int,
    compact: Optional[bool] = None,
) -> MutationResult:
    """Relocate a task into ``new_column_id`` at position ``new_order``.

    Moving to the task's own column is a reorder.
    """
    task = state.tasks.get(task_id)
    if task is None:
        return _not_found(state, "Task", task_id)
    target = state.columns.get(new_column_id)
    if target is None:
        return _not_found(state, "Column", new_column_id)
    if task.column_id == new_column_id:
        return reorder_task(state, task_id, new_order, compact=compact)

    columns = dict(state.columns)
    tasks = {**state.tasks, task_id: task.model_copy(update={"column_id": new_column_id, "order": new_order})}

    source_ids = None
    source = columns.get(task.column_id)
    if source is not None:
        source_ids = remove_id(source.task_ids, task_id)
        columns[source.id] = source.model_copy(update={"task_ids": source_ids})

    target_ids = insert_id(target.task_ids, task_id, new_order)
    columns[new_column_id] = target.model_copy(update={"task_ids": target_ids})

    if _compact(compact):
        if source_ids is not None:
            tasks = renumber(tasks, source_ids)
        tasks = renumber(tasks, target_ids)

    logger.debug(f"Task {task_id} moved {task.column_id} -> {new_column_id} at {new_order}")
    return _applied(state.model_copy(update={"tasks": tasks, "columns": columns}), task_id)


def reorder_task(
    state: AppState,
    task_id: str,
    new_order: int,
    compact: Optional[bool] = None,
) -> MutationResult:
    task = state.tasks.get(task_id)
    if task is None:
        return _not_found(state, "Task", task_id)
    column = state.columns.get(task.column_id)
    if column is None:
        return _not_found(state, "Column", task.column_id)

    task_ids = move_id(column.task_ids, task_id, new_order)
    columns = {**state.columns, column.id: column.model_copy(update={"task_ids": task_ids})}
    if _compact(compact):
        tasks = renumber(state.tasks, task_ids)
    else:
        tasks = {**state.tasks, task_id: task.model_copy(update={"order": new_order})}

    return _applied(state.model_copy(update={"tasks": tasks, "columns": columns}), task_id)

