"""Aggregate root and the ephemeral search filters."""

from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional, Literal

from taskboard.schemas.board import Board
from taskboard.schemas.column import Column
from taskboard.schemas.task import Task

PriorityFilter = Literal["high", "medium", "low", "all"]
DueDateFilter = Literal["all", "overdue", "today", "week"]


class AppState(BaseModel):
    """Boards, columns and tasks keyed by id; ``AppState()`` is the empty state."""

    model_config = ConfigDict(frozen=True)

    boards: Dict[str, Board] = {}
    columns: Dict[str, Column] = {}
    tasks: Dict[str, Task] = {}
    current_board_id: Optional[str] = None


class SearchFilters(BaseModel):
    search_term: str = ""
    priority: PriorityFilter = "all"
    due_date_filter: DueDateFilter = "all"
