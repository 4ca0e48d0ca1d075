"""
Persistence gateway - the whole AppState as one JSON blob under a fixed key
"""

import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.core.config import settings
from taskboard.models.state_blob import StateBlob
from taskboard.schemas.state import AppState

logger = logging.getLogger(__name__)


def save_state(db: Session, state: AppState, key: Optional[str] = None) -> bool:
    """Best effort: failures are logged, never raised."""
    key = key or settings.STORAGE_KEY
    try:
        payload = state.model_dump_json()
        blob = db.query(StateBlob).filter(StateBlob.key == key).first()
        if blob is None:
            db.add(StateBlob(key=key, value=payload))
        else:
            blob.value = payload
        db.commit()
        return True
    except (SQLAlchemyError, ValueError, TypeError) as e:
        db.rollback()
        logger.error(f"Error saving state '{key}': {e}")
        return False


def load_state(db: Session, key: Optional[str] = None) -> Optional[AppState]:
    """Return the saved state, or None when missing or unreadable."""
    key = key or settings.STORAGE_KEY
    try:
        blob = db.query(StateBlob).filter(StateBlob.key == key).first()
    except SQLAlchemyError as e:
        logger.error(f"Error loading state '{key}': {e}")
        return None

    if blob is None:
        return None

    try:
        return AppState.model_validate_json(blob.value)
    except ValidationError as e:
        logger.warning(f"Saved state '{key}' is malformed, starting empty: {e}")
        return None

