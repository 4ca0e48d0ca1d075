"""Drop-target resolution for drag-and-drop between columns."""

import logging
from typing import Optional

from taskboard.schemas.state import AppState
from taskboard.services.board_engine import MutationResult, Outcome, move_task

logger = logging.getLogger(__name__)


def resolve_drop(
    state: AppState,
    task_id: str,
    dragged_task_id: Optional[str],
    column_id: str,
) -> MutationResult:
    """Append the dropped task to ``column_id``.

    A drop carrying another id than the one recorded at drag start is stale
    and ignored, as is a drop on the task's own column.
    """
    if task_id and task_id != dragged_task_id:
        logger.info(f"Stale drop ignored: got {task_id}, dragging {dragged_task_id}")
        return MutationResult(state=state, outcome=Outcome.IGNORED, entity_id=task_id, detail="Stale drag")

    task = state.tasks.get(task_id)
    if task is None:
        return MutationResult(state=state, outcome=Outcome.NOT_FOUND, entity_id=task_id, detail="Task not found")
    if column_id not in state.columns:
        return MutationResult(state=state, outcome=Outcome.NOT_FOUND, entity_id=column_id, detail="Column not found")
    if task.column_id == column_id:
        return MutationResult(state=state, outcome=Outcome.IGNORED, entity_id=task_id, detail="Already in column")

    target_count = sum(1 for t in state.tasks.values() if t.column_id == column_id)
    return move_task(state, task_id, column_id, target_count)


class DragSession:
    """Remembers which task is being dragged between start and drop."""

    def __init__(self):
        self.dragged_task_id: Optional[str] = None

    def start(self, task_id: str) -> None:
        self.dragged_task_id = task_id

    def end(self) -> None:
        self.dragged_task_id = None

    def drop(self, state: AppState, task_id: str, column_id: str) -> MutationResult:
        result = resolve_drop(state, task_id, self.dragged_task_id, column_id)
        self.end()
        return result
