# =============================================================================
# File: test_config_loader.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from unittest.mock import patch

import pytest

from app.config.config_loader import ConfigLoader
from app.config.validation import ConfigValidator
from app.exceptions import ConfigurationError
from app.models.validation_report import Severity, ValidationOutcome


class TestConfigLoader:

    def test_unset_node_env_is_not_production(self):
        settings = ConfigLoader.get_app_settings({})

        assert settings.app.mode == ""
        assert settings.app.is_production is False
        assert settings.app.is_development is False
        assert settings.server.port == 3000
        assert settings.storage.data_dir == os.path.join(os.getcwd(), "data")

    def test_weak_secret_proceeds_when_node_env_unset(self, valid_environ, reporter):
        settings = ConfigLoader.get_app_settings({})
        valid_environ["JWT_SECRET"] = "short"

        report = ConfigValidator(reporter).validate(valid_environ, settings.app.mode)

        assert report.messages(Severity.CRITICAL) != []
        assert report.outcome is ValidationOutcome.PROCEED

    def test_node_env_is_kept_verbatim(self):
        settings = ConfigLoader.get_app_settings({"NODE_ENV": "Production"})

        assert settings.app.mode == "Production"
        assert settings.app.is_production is False

    def test_development_overlay_is_merged(self):
        settings = ConfigLoader.get_app_settings({"NODE_ENV": "development"})

        assert settings.app.mode == "development"
        assert settings.app.is_development is True
        assert settings.app.debug is True
        assert settings.server.host == "127.0.0.1"
        # Untouched keys survive the deep merge
        assert settings.server.port == 3000

    def test_environment_overrides(self, tmp_path):
        settings = ConfigLoader.get_app_settings(
            {
                "NODE_ENV": "production",
                "PORT": "8080",
                "HOST": "10.0.0.5",
                "APP_DATA_DIR": str(tmp_path),
                "APP_DEBUG_MODE": "1",
            }
        )

        assert settings.server.port == 8080
        assert settings.server.host == "10.0.0.5"
        assert settings.storage.data_dir == str(tmp_path)
        assert settings.app.debug is True

    def test_invalid_port_keeps_file_value(self):
        settings = ConfigLoader.get_app_settings({"PORT": "not-a-port"})

        assert settings.server.port == 3000

    def test_missing_config_file_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader._load_config_data("does_not_exist.json")

        assert "Config file not found" in str(exc_info.value)

    def test_malformed_config_file_raises(self):
        with patch("app.config.config_loader.json.load", side_effect=ValueError("bad")):
            with pytest.raises(ConfigurationError):
                ConfigLoader.get_app_settings({})

    @pytest.mark.parametrize("mode", ["../config/appsettings", "dev/../development", "Development"])
    def test_overlay_requires_safe_mode_name(self, mode):
        with patch("app.config.config_loader.os.path.exists", return_value=True) as mock_exists:
            ConfigLoader._load_config_data("appsettings.json", mode)

        checked = [c.args[0] for c in mock_exists.call_args_list]
        assert checked == [checked[0]]
        assert checked[0].endswith("appsettings.json")
