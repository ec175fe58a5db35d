"""Health check route"""

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health-check")
def health_check(request: Request):
    """Basic health check endpoint"""
    return {"status": "ok", "service": request.app.state.settings.app_name}
