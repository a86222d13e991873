"""Health routes - registers all health endpoints."""

from fastapi import APIRouter

from apps.health.handlers.check_health import HealthResponse, check_health

router = APIRouter(prefix="/health", tags=["Health"])

# GET /health - Health check
router.get("", response_model=HealthResponse)(check_health)
