"""State blob model"""

from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime
from taskboard.core.database import Base


class StateBlob(Base):
    __tablename__ = "state_blobs"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)  # AppState sérialisé en JSON
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
