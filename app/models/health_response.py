# =============================================================================
# File: health_response.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field

from app.models.validation_report import ValidationOutcome


class HealthResponse(BaseModel):
    """
    Health snapshot built around the latest configuration validation report.

    ``status`` is "unhealthy" when the configuration would halt startup,
    "degraded" when there are non-fatal findings or the data directory is
    unusable, and "healthy" otherwise.
    """

    status: str = Field(description="Overall health status")
    service: str = Field(description="Service name")
    mode: str = Field(description="NODE_ENV the configuration was validated under")
    outcome: ValidationOutcome = Field(description="Outcome of the configuration validation")
    finding_counts: Dict[str, int] = Field(
        description="Number of findings per severity: critical, missing, warning, info"
    )
    missing: List[str] = Field(default_factory=list, description="Required settings not set")
    components: Dict[str, str] = Field(description="Status of configuration and storage")
    data_dir: str = Field(description="JSON store directory")
    timestamp: datetime
    uptime_seconds: float
