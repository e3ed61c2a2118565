# =============================================================================
# File: startup_validator.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
import sys
from typing import Callable, Mapping, Optional

from app.config.validation import ConfigValidator
from app.logger import get_logger
from app.models.validation_report import ValidationReport
from app.utils.log_sanitizer import mask_secret, sanitize_for_log

logger = get_logger("startup_validator")

_last_report: Optional[ValidationReport] = None


def get_last_report() -> Optional[ValidationReport]:
    """Return the report of the most recent startup validation, if any."""
    return _last_report


def validate_startup_config(
    environ: Optional[Mapping[str, str]] = None,
    mode: Optional[str] = None,
    terminate: Callable[[int], object] = sys.exit,
    validator: Optional[ConfigValidator] = None,
) -> Optional[ValidationReport]:
    """
    Validates configuration at startup and terminates if it must not start.

    ``terminate`` is called once with status 1 for a halt outcome or an
    unexpected validation error, and never when startup may proceed.
    """
    global _last_report

    if environ is None:
        environ = dict(os.environ)
    if mode is None:
        from app.app_init import APP_SETTINGS

        mode = APP_SETTINGS.app.mode
    validator = validator or ConfigValidator()

    try:
        report = validator.validate(environ, mode)
    except (TypeError, AttributeError, KeyError) as e:
        logger.critical(f"Configuration structure error: {e}")
        terminate(1)
        return None
    except Exception as e:
        logger.critical(f"Unexpected error during configuration validation: {e}")
        terminate(1)
        return None

    _last_report = report
    if report.should_halt:
        logger.critical("Application startup aborted due to invalid configuration")
        terminate(1)
    else:
        # Print configuration values (secrets masked)
        logger.info(
            f"Startup config: PORT={sanitize_for_log(environ.get('PORT'))}, "
            f"JWT_SECRET={mask_secret(environ.get('JWT_SECRET'))}, "
            f"TELEGRAM_BOT_TOKEN={mask_secret(environ.get('TELEGRAM_BOT_TOKEN'))}, "
            f"TELEGRAM_CHAT_ID={sanitize_for_log(environ.get('TELEGRAM_CHAT_ID'))}"
        )
        logger.info("Startup configuration validation successful")
    return report
