# =============================================================================
# File: health_service.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from datetime import datetime, timezone
from time import time
from typing import Mapping, Optional

from app.app_init import APP_SETTINGS
from app.config.startup_validator import get_last_report
from app.config.validation import ConfigValidator
from app.logger import get_logger
from app.models.health_response import HealthResponse
from app.models.validation_report import ValidationReport

logger = get_logger("health_service")

# Track service start time
SERVICE_START_TIME = time()


class HealthService:
    """
    Service for health check operations.

    Reports the configuration validation status and data directory access.
    """

    @classmethod
    def get_health_status(cls, environ: Optional[Mapping[str, str]] = None) -> HealthResponse:
        """
        Perform a health check and return status.

        Args:
            environ: Settings snapshot to re-validate instead of the startup report.

        Returns:
            HealthResponse: Configuration outcome, finding counts and component statuses.
        """
        report = cls._current_report(environ)
        components = {
            "configuration": cls._configuration_status(report),
            "storage": cls._check_storage(),
        }

        overall_status = "healthy"
        if any(status == "unhealthy" for status in components.values()):
            overall_status = "unhealthy"
        elif any(status == "degraded" for status in components.values()):
            overall_status = "degraded"

        return HealthResponse(
            status=overall_status,
            service=APP_SETTINGS.app.name,
            mode=report.mode,
            outcome=report.outcome,
            finding_counts={
                "critical": len(report.critical),
                "missing": len(report.missing),
                "warning": len(report.warnings),
                "info": len(report.info),
            },
            missing=[finding.setting for finding in report.missing],
            components=components,
            data_dir=APP_SETTINGS.storage.data_dir,
            timestamp=datetime.now(timezone.utc),
            uptime_seconds=time() - SERVICE_START_TIME,
        )

    @classmethod
    def _current_report(cls, environ: Optional[Mapping[str, str]] = None) -> ValidationReport:
        """
        Return the startup report, or re-validate without writing to the log
        when a snapshot is given or startup validation has not run.
        """
        report = get_last_report()
        if report is None or environ is not None:
            snapshot = dict(os.environ) if environ is None else environ
            report = ConfigValidator().evaluate(snapshot, APP_SETTINGS.app.mode)
        return report

    @staticmethod
    def _configuration_status(report: ValidationReport) -> str:
        if report.should_halt:
            return "unhealthy"
        if report.critical or report.warnings:
            return "degraded"
        return "healthy"

    @classmethod
    def _check_storage(cls) -> str:
        """Check that the JSON data directory exists and is writable."""
        data_dir = APP_SETTINGS.storage.data_dir
        if not os.path.isdir(data_dir):
            return "degraded"
        if not os.access(data_dir, os.W_OK):
            logger.warning(f"Data directory is not writable: {data_dir}")
            return "degraded"
        return "healthy"
