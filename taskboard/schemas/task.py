"""Task entity and the schemas used to create, edit and move it."""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Optional, Literal

Priority = Literal["high", "medium", "low"]


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    created_by: str = ""
    priority: Priority = "medium"
    due_date: date
    created_at: datetime
    column_id: str
    order: int = 0


class TaskCreate(BaseModel):
    title: str
    description: str = ""
    created_by: str = ""
    priority: Priority = "medium"
    due_date: date

class TaskUpdate(BaseModel):
    """Fields not sent are left untouched."""

    title: Optional[str] = None
    description: Optional[str] = None
    created_by: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[date] = None

class TaskMove(BaseModel):
    column_id: str
    order: int = Field(ge=0)

class TaskReorder(BaseModel):
    order: int = Field(ge=0)

class DropResponse(BaseModel):
    outcome: str
    task: Optional[Task] = None
