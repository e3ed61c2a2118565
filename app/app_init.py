# =============================================================================
# File: app_init.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from app.config.config_loader import ConfigLoader
from app.logger import AppLogger, get_logger

logger = get_logger("app_init")
APP_SETTINGS = ConfigLoader.get_app_settings()
APP_LOGGER = AppLogger(is_development=APP_SETTINGS.app.is_development)

logger.info(
    f"Loaded settings for '{APP_SETTINGS.app.name}' with NODE_ENV={APP_SETTINGS.app.mode!r}"
)
