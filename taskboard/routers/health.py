from fastapi import APIRouter

from taskboard.core.config import settings

router = APIRouter()

SERVICE_NAME = "taskboard"


@router.get("/z")
def healthz():
    # liveness + clé de stockage utilisée par cette instance
    return {"status": "ok", "service": SERVICE_NAME, "storage_key": settings.STORAGE_KEY}
