# =============================================================================
# File: config_loader.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import json
import os
import re
from typing import Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from app.config.appsettings import AppSettings
from app.exceptions.custom_exceptions import ConfigurationError
from app.logger import get_logger
from app.utils.log_sanitizer import sanitize_for_log
from app.utils.type_checker import parse_leading_int

logger = get_logger("config_loader")

# Modes allowed to select an appsettings.<mode>.json overlay
_OVERLAY_MODE = re.compile(r"[a-z0-9_-]+", re.ASCII)


class ConfigLoader:
    @staticmethod
    def get_app_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
        """
        Loads AppSettings from appsettings.json and the mode-specific override in the same folder,
        then applies NODE_ENV, PORT, HOST, APP_DATA_DIR and APP_DEBUG_MODE from the environment.
        NODE_ENV is kept verbatim as the mode; an unset NODE_ENV gives an empty, non-production mode.
        """
        environ = os.environ if environ is None else environ
        mode = environ.get("NODE_ENV") or ""

        data = ConfigLoader._load_config_data("appsettings.json", mode)
        try:
            settings = AppSettings(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid appsettings content: {e}") from e

        settings.app.mode = mode
        settings.app.is_production = mode == "production"

        port = parse_leading_int(environ.get("PORT"))
        if port is not None:
            settings.server.port = port
        settings.server.host = environ.get("HOST") or settings.server.host

        data_dir = environ.get("APP_DATA_DIR") or settings.storage.data_dir
        if not os.path.isabs(data_dir):
            data_dir = os.path.join(os.getcwd(), data_dir)
        settings.storage.data_dir = data_dir

        if "APP_DEBUG_MODE" in environ:
            settings.app.debug = environ.get("APP_DEBUG_MODE") == "1"

        return settings

    @staticmethod
    def _load_config_data(config_file_name: str, mode: Optional[str] = None) -> dict:
        """
        Loads a config file and merges the mode-specific override if present.
        Performs a deep merge for nested config sections.
        """
        base_dir = os.path.dirname(os.path.abspath(__file__))
        base_path = os.path.join(base_dir, config_file_name)

        logger.debug(f"Loading config from {base_path}")

        def deep_update(d, u):
            for k, v in u.items():
                if isinstance(v, dict) and isinstance(d.get(k), dict):
                    deep_update(d[k], v)
                else:
                    d[k] = v

        if not os.path.exists(base_path):
            raise ConfigurationError(f"Config file not found: {base_path}")

        try:
            with open(base_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if mode and not _OVERLAY_MODE.fullmatch(mode):
                logger.warning(f"Ignoring settings overlay for unsafe mode {sanitize_for_log(mode)}")
            elif mode:
                name, ext = os.path.splitext(config_file_name)
                env_path = os.path.join(base_dir, f"{name}.{mode}{ext}")
                if os.path.exists(env_path):
                    with open(env_path, "r", encoding="utf-8") as f:
                        env_data = json.load(f)
                    deep_update(data, env_data)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read config file {config_file_name}: {e}") from e

        return data


# Example usage:
# settings = ConfigLoader.get_app_settings()
