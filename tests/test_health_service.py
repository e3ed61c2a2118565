# =============================================================================
# File: test_health_service.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from unittest.mock import patch

import pytest

from app.config.validation import ConfigValidator
from app.models.validation_report import ValidationOutcome
from app.services.health_service import HealthService


@pytest.fixture
def mock_settings(tmp_path):
    with patch("app.services.health_service.APP_SETTINGS") as settings:
        settings.app.name = "Env Guard"
        settings.app.mode = "production"
        settings.storage.data_dir = str(tmp_path)
        yield settings


class TestHealthService:

    def test_healthy_when_configuration_clean(self, mock_settings, valid_environ):
        health = HealthService.get_health_status(valid_environ)

        assert health.status == "healthy"
        assert health.components == {"configuration": "healthy", "storage": "healthy"}
        assert health.outcome is ValidationOutcome.PROCEED
        assert health.mode == "production"
        assert health.finding_counts == {"critical": 0, "missing": 0, "warning": 0, "info": 0}

    def test_degraded_on_warnings(self, mock_settings, valid_environ):
        valid_environ["PORT"] = "99999"

        health = HealthService.get_health_status(valid_environ)

        assert health.status == "degraded"
        assert health.finding_counts["warning"] == 1

    def test_unhealthy_when_required_missing(self, mock_settings):
        mock_settings.app.mode = "development"

        health = HealthService.get_health_status({"PORT": "3000"})

        assert health.status == "unhealthy"
        assert health.outcome is ValidationOutcome.HALT
        assert health.missing == ["JWT_SECRET", "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID"]

    def test_uses_last_startup_report(self, mock_settings, reporter):
        import app.config.startup_validator as startup_validator

        startup_validator._last_report = ConfigValidator(reporter).evaluate({}, "production")

        health = HealthService.get_health_status()

        assert health.components["configuration"] == "unhealthy"

    def test_missing_data_dir_is_degraded(self, mock_settings, tmp_path, valid_environ):
        mock_settings.storage.data_dir = str(tmp_path / "nope")

        health = HealthService.get_health_status(valid_environ)

        assert health.components["storage"] == "degraded"
        assert health.status == "degraded"
