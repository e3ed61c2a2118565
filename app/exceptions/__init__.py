# =============================================================================
# File: __init__.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from .custom_exceptions import (
    ConfigurationError,
    EnvGuardError,
    StorageError,
)
