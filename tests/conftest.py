# =============================================================================
# File: conftest.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from unittest.mock import Mock

import pytest

import app.config.startup_validator as startup_validator


@pytest.fixture
def valid_environ():
    """A settings snapshot that passes every check."""
    return {
        "PORT": "3000",
        "JWT_SECRET": "x" * 40,
        "TELEGRAM_BOT_TOKEN": "abc",
        "TELEGRAM_CHAT_ID": "12345",
    }


@pytest.fixture
def reporter():
    return Mock()


@pytest.fixture(autouse=True)
def reset_last_report():
    startup_validator._last_report = None
    yield
    startup_validator._last_report = None
