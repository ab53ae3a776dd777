"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from student_registry.presentation.api.v1.endpoints.health import router as health_router
from student_registry.presentation.api.v1.endpoints.students import router as students_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(students_router)
