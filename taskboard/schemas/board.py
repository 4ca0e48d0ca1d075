"""Board entity and its request/response schemas."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional, Tuple, List

from taskboard.schemas.column import Column
from taskboard.schemas.task import Task


class Board(BaseModel):
    """Top-level container. ``column_ids`` mirrors the board's columns sorted by order."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    created_by: str = ""
    created_at: datetime
    column_ids: Tuple[str, ...] = ()


# Schemas boards

class BoardCreate(BaseModel):
    title: str
    description: str = ""
    created_by: str = ""

class CurrentBoardUpdate(BaseModel):
    board_id: Optional[str] = None

class CurrentBoardResponse(BaseModel):
    current_board_id: Optional[str]

class BoardSummary(BaseModel):
    board: Board
    column_count: int

class ColumnWithTasks(BaseModel):
    column: Column
    tasks: List[Task]

class BoardDetail(BaseModel):
    board: Board
    columns: List[ColumnWithTasks]
