"""Health check endpoint — reports whether records are being persisted."""

from fastapi import APIRouter, Depends

from student_registry.application.services import StudentStore
from student_registry.config import get_settings
from student_registry.infrastructure.dependencies import get_student_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(store: StudentStore = Depends(get_student_store)) -> dict:
    """Returns the application health status and record count.

    ``degraded`` means the app works but changes will not survive a restart.
    """
    settings = get_settings()
    return {
        "status": "degraded" if store.persistence_warning else "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "records": len(store),
    }
