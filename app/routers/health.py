# =============================================================================
# File: health.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from fastapi import APIRouter

from app.models.health_response import HealthResponse
from app.services.health_service import HealthService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Health check endpoint with configuration and storage status.
    """
    return HealthService.get_health_status()


@router.get("/health/ready")
def readiness_check():
    """
    Readiness probe endpoint. Not ready while the configuration would halt startup.
    """
    health = HealthService.get_health_status()
    if health.components.get("configuration") != "unhealthy":
        return {"status": "ready"}
    else:
        return {"status": "not_ready", "reason": health.status}


@router.get("/health/live")
def liveness_check():
    """
    Liveness probe endpoint.
    """
    return {"status": "alive"}
