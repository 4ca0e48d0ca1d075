import logging

from fastapi import FastAPI
from taskboard.core.config import settings
from taskboard.core.database import engine, Base
from taskboard.routers import health, boards, columns, tasks

logging.basicConfig(level=settings.LOG_LEVEL)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TaskBoard API",
    version="0.1.0"
)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(boards.router)
app.include_router(columns.router)
app.include_router(tasks.router)
