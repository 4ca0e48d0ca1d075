from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple


class Column(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    board_id: str
    order: int = 0  # rang parmi les colonnes du board
    task_ids: Tuple[str, ...] = ()


# Schemas colonnes

class ColumnCreate(BaseModel):
    title: str

class ColumnUpdate(BaseModel):
    title: str

class DropRequest(BaseModel):
    task_id: str
    dragged_task_id: Optional[str] = None
