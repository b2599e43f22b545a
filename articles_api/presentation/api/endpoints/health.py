"""Health check endpoint — no dependencies beyond settings, always available."""

from fastapi import APIRouter, Depends

from articles_api.config import Settings
from articles_api.infrastructure.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Returns the current application health status."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "repository_backend": settings.repository_backend,
    }
