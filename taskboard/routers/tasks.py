from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.routers.common import get_state, run_command
from taskboard.schemas.state import AppState
from taskboard.schemas.task import Task, TaskCreate, TaskUpdate, TaskMove, TaskReorder
from taskboard.services import board_engine

router = APIRouter(tags=["tasks"])


@router.post("/columns/{column_id}/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(
    column_id: str,
    task_data: TaskCreate,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.create_task, column_id, **task_data.model_dump())
    return result.state.tasks[result.entity_id]


@router.get("/tasks/{task_id}", response_model=Task)
def get_task(task_id: str, state: AppState = Depends(get_state)):
    task = state.tasks.get(task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.put("/tasks/{task_id}", response_model=Task)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    db: Session = Depends(get_db)
):
    update_data = task_data.model_dump(exclude_unset=True, exclude_none=True)
    result = run_command(db, board_engine.update_task, task_id, update_data)
    return result.state.tasks[task_id]


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db)
):
    run_command(db, board_engine.delete_task, task_id)


@router.post("/tasks/{task_id}/move", response_model=Task)
def move_task(
    task_id: str,
    move: TaskMove,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.move_task, task_id, move.column_id, move.order)
    return result.state.tasks[task_id]


@router.post("/tasks/{task_id}/reorder", response_model=Task)
def reorder_task(
    task_id: str,
    reorder: TaskReorder,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.reorder_task, task_id, reorder.order)
    return result.state.tasks[task_id]
