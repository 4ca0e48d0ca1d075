from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.routers.common import run_command
from taskboard.schemas.column import Column, ColumnCreate, ColumnUpdate, DropRequest
from taskboard.schemas.task import DropResponse
from taskboard.services import board_engine
from taskboard.services.drag_service import resolve_drop

router = APIRouter(tags=["columns"])


@router.post("/boards/{board_id}/columns", response_model=Column, status_code=status.HTTP_201_CREATED)
def create_column(
    board_id: str,
    column_data: ColumnCreate,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.create_column, column_data.title, board_id)
    return result.state.columns[result.entity_id]


@router.put("/columns/{column_id}", response_model=Column)
def update_column(
    column_id: str,
    column_data: ColumnUpdate,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.update_column, column_id, column_data.title)
    return result.state.columns[column_id]


@router.delete("/columns/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    column_id: str,
    db: Session = Depends(get_db)
):
    run_command(db, board_engine.delete_column, column_id)


@router.post("/columns/{column_id}/drop", response_model=DropResponse)
def drop_task(
    column_id: str,
    drop: DropRequest,
    db: Session = Depends(get_db)
):
    """Dépose une tâche glissée à la fin de la colonne"""
    result = run_command(db, resolve_drop, drop.task_id, drop.dragged_task_id, column_id)
    return DropResponse(outcome=result.outcome.value, task=result.state.tasks.get(drop.task_id))
