"""Health check route"""

from fastapi import APIRouter

from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(status="ok", service=settings.app_name, version=settings.app_version)
