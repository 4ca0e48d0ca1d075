import threading
from typing import Callable

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.schemas.state import AppState
from taskboard.services.board_engine import MutationResult, Outcome
from taskboard.services.persistence import load_state, save_state

# un seul écrivain: chargement, commande et sauvegarde passent sous ce verrou
_write_lock = threading.Lock()


def get_state(db: Session = Depends(get_db)) -> AppState:
    """Dépendance état courant en lecture (état vide si rien n'est sauvegardé)"""
    return load_state(db) or AppState()


def commit_result(db: Session, result: MutationResult) -> MutationResult:
    """Persist an applied result; a missing entity becomes a 404."""
    if result.outcome == Outcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.detail)
    if result.ok:
        save_state(db, result.state)
    return result


def run_command(db: Session, command: Callable[..., MutationResult], *args, **kwargs) -> MutationResult:
    """Load the saved state, apply one engine command and save, one request at a time."""
    with _write_lock:
        state = load_state(db) or AppState()
        return commit_result(db, command(state, *args, **kwargs))
