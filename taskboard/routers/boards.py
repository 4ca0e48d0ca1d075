from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from taskboard.core.database import get_db
from taskboard.routers.common import get_state, run_command
from taskboard.schemas.board import (
    Board,
    BoardCreate,
    BoardDetail,
    BoardSummary,
    ColumnWithTasks,
    CurrentBoardResponse,
    CurrentBoardUpdate,
)
from taskboard.schemas.state import AppState, SearchFilters, PriorityFilter, DueDateFilter
from taskboard.services import board_engine
from taskboard.services.query_service import (
    board_summaries,
    columns_for_board,
    filter_tasks,
    group_by_column,
)

router = APIRouter(prefix="/boards", tags=["boards"])


@router.post("", response_model=Board, status_code=status.HTTP_201_CREATED)
def create_board(
    board_data: BoardCreate,
    db: Session = Depends(get_db)
):
    result = run_command(
        db,
        board_engine.create_board,
        title=board_data.title,
        description=board_data.description,
        created_by=board_data.created_by
    )
    return result.state.boards[result.entity_id]


@router.get("", response_model=List[BoardSummary])
def list_boards(state: AppState = Depends(get_state)):
    return [BoardSummary(board=board, column_count=count) for board, count in board_summaries(state)]


@router.get("/current", response_model=CurrentBoardResponse)
def get_current_board(state: AppState = Depends(get_state)):
    return CurrentBoardResponse(current_board_id=state.current_board_id)


@router.put("/current", response_model=CurrentBoardResponse)
def set_current_board(
    payload: CurrentBoardUpdate,
    db: Session = Depends(get_db)
):
    result = run_command(db, board_engine.set_current_board, payload.board_id)
    return CurrentBoardResponse(current_board_id=result.state.current_board_id)


@router.get("/{board_id}", response_model=BoardDetail)
def get_board(
    board_id: str,
    state: AppState = Depends(get_state),
    search: str = Query(""),
    priority: PriorityFilter = Query("all"),
    due: DueDateFilter = Query("all")
):
    """Board avec ses colonnes ordonnées et les tâches filtrées de chaque colonne"""
    board = state.boards.get(board_id)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    filters = SearchFilters(search_term=search, priority=priority, due_date_filter=due)
    columns = columns_for_board(state, board_id)
    grouped = group_by_column(filter_tasks(state, board_id, filters), columns)

    return BoardDetail(
        board=board,
        columns=[ColumnWithTasks(column=column, tasks=grouped[column.id]) for column in columns]
    )


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(
    board_id: str,
    db: Session = Depends(get_db)
):
    run_command(db, board_engine.delete_board, board_id)
